"""
This script combines Sen's slope, the Mann-Kendall score and its corrected
variance into a single call.
"""
from collections import namedtuple
import warnings
import numpy as np

from ._utils import _to_float_array
from .sen_slope import sen_slope
from .kendall_s import kendall_s
from .variance_s import variance_s


def trend_statistics(y, x=None, rof=None, min_size=10):
    """
    Trend statistics for a univariate series.

    Input:
        y: a vector of data, in time order.
        x: a vector of the independent variable (e.g. timestamps). Defaults
           to 0, 1, ..., n-1. The Mann-Kendall score is computed with `y`
           sorted by `x`.
        rof: autocorrelations of the series at lags 1..n-1. If None, the
             series is treated as serially independent (all zeros), which
             gives the classical Mann-Kendall statistics.
        min_size (int): Minimum sample size. Warnings issued if n < min_size.
                        Set to None to disable check.
    Output:
        slope, s, essf, var_s, z0, z

    A namedtuple containing the following fields:
        - slope: The Sen's slope.
        - s: The Mann-Kendall score.
        - essf: The autocorrelation inflation factor of the variance.
        - var_s: The tie-corrected variance of `s`.
        - z0: The standardized score ignoring autocorrelation.
        - z: The standardized score against the autocorrelation-adjusted variance.
    """
    res = namedtuple('Trend_Statistics', ['slope', 's', 'essf', 'var_s', 'z0', 'z'])

    y = _to_float_array(y, name='y')
    n = len(y)

    if min_size is not None and n < min_size:
        warnings.warn(
            f"Sample size (n={n}) is below recommended minimum (n={min_size}). "
            f"Results may be unreliable. Consider using more data or setting "
            f"min_size=None to suppress this warning.",
            UserWarning
        )

    if rof is None:
        rof = np.zeros(max(n - 1, 0))

    slope = sen_slope(y, x)

    # The score is computed in order of x; ties in x keep their input order
    if x is not None:
        order = np.argsort(_to_float_array(x, name='x', allow_datetime=True), kind='mergesort')
        y = y[order]

    s = kendall_s(y)
    essf, var_s, z0, z = variance_s(y, rof, s)

    return res(slope, s, essf, var_s, z0, z)
