"""
This script provides the variance of the Mann-Kendall score, corrected for
ties and for serial autocorrelation, along with the standardized scores.
"""
from collections import namedtuple
import numpy as np

from ._utils import (_to_float_array, _check_min_length, _as_integer_score,
                     _tie_counts, _z_score)
from .exceptions import InvalidInputError


class VarianceResult(namedtuple('VarianceResult', ['essf', 'var_s', 'z0', 'z'])):
    """
    Result of `variance_s`.

    Fields:
        - essf: The autocorrelation inflation factor (1.0 when all
                autocorrelations are zero).
        - var_s: The tie-corrected variance of S, before scaling by `essf`.
        - z0: The classical standardized score (ties only).
        - z: The standardized score against the autocorrelation-adjusted
             variance `var_s * essf`.
    """
    __slots__ = ()

    def as_dict(self):
        """The result as a record, with `var_s` under its conventional `var.S` key."""
        return {'essf': self.essf, 'var.S': self.var_s, 'z0': self.z0, 'z': self.z}


def _effective_sample_size_factor(rof, n):
    """
    essf = 1 + 2 / (n(n-1)(n-2)) * sum_{i=1}^{n-1} (n-i)(n-i-1)(n-i-2) * rof[i-1]
    """
    lags = np.arange(1, n)
    weights = (n - lags) * (n - lags - 1) * (n - lags - 2)
    ess = np.sum(weights * rof)
    return 1 + ess * 2.0 / (n * (n - 1) * (n - 2))


def _tie_corrected_variance(x):
    n = len(x)
    var_s = n * (n - 1) * (2 * n + 5) / 18.0

    tp = _tie_counts(x)
    if len(tp) > 0:
        var_s -= np.sum(tp * (tp - 1) * (2 * tp + 5)) / 18.0
    return float(var_s)


def variance_s(x, rof, s):
    """
    Variance of the Mann-Kendall score with tie and autocorrelation corrections.

    Input:
        x: a vector of data, in time order (n >= 3).
        rof: autocorrelations of the series at lags 1..n-1 (length n-1).
             Typically only the significant ones are kept and the rest set
             to zero by the caller.
        s: the Mann-Kendall score of `x`, usually `kendall_s(x)`. It is
           taken as given and not recomputed.
    Output:
        A VarianceResult namedtuple: (essf, var_s, z0, z).

    The scores use the continuity correction: (S - 1) for S > 0, (S + 1)
    for S < 0, and zero when S == 0.

    Raises:
        InvalidInputError: if n < 3, `rof` does not have n-1 entries, any
            input is non-finite or `s` is not an integer.
        UndefinedComputationError: if S != 0 and either variance is not
            strictly positive.
    """
    x = _to_float_array(x, name='x')
    rof = _to_float_array(rof, name='rof')
    s = _as_integer_score(s)

    n = len(x)
    _check_min_length(x, 3, name='x')
    if len(rof) != n - 1:
        raise InvalidInputError(
            f"`rof` must hold the autocorrelations at lags 1..{n - 1} "
            f"(length {n - 1}), got length {len(rof)}.")

    essf = float(_effective_sample_size_factor(rof, n))
    var_s = _tie_corrected_variance(x)
    adjusted_var_s = var_s * essf

    z0 = float(_z_score(s, var_s))
    z = float(_z_score(s, adjusted_var_s))

    return VarianceResult(essf, var_s, z0, z)
