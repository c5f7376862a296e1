"""
This script provides Sen's slope estimator for equally or unequally
spaced series.
"""
import warnings
import numpy as np

from ._utils import _to_float_array, _check_min_length, _pair_indices
from .exceptions import InvalidInputError, UndefinedComputationError


def _pairwise_slopes(y, x):
    """
    Slopes between every pair of observations, excluding pairs that share
    an `x` value (their slope is undefined).

    Returns:
        tuple: (slopes, n_excluded)
    """
    i, j = _pair_indices(len(y))

    y_diff = y[j] - y[i]
    x_diff = x[j] - x[i]

    # Avoid division by zero
    valid_mask = x_diff != 0

    return y_diff[valid_mask] / x_diff[valid_mask], int(np.sum(~valid_mask))


def sen_slope(y, x=None):
    """
    Sen's slope: the median of the slopes between all pairs of observations.

    Input:
        y: a vector of data.
        x: a vector of the independent variable (e.g. timestamps), the same
           length as `y`. Datetime-like values are converted to seconds, so
           the slope is then per second. Defaults to 0, 1, ..., n-1.
    Output:
        The Sen's slope as a float.

    Pairs with equal `x` values have no defined slope and are left out of
    the median. A UserWarning is issued when this happens.

    Raises:
        InvalidInputError: if `x` and `y` differ in length, fewer than two
            observations are given or the data contain NaN/inf.
        UndefinedComputationError: if every pair shares the same `x` value.
    """
    y = _to_float_array(y, name='y')
    n = len(y)
    _check_min_length(y, 2, name='y')

    if x is None:
        x = np.arange(n, dtype=float)
    else:
        x = _to_float_array(x, name='x', allow_datetime=True)
        if len(x) != n:
            raise InvalidInputError(
                f"`x` and `y` must have the same length, got {len(x)} and {n}.")

    slopes, n_excluded = _pairwise_slopes(y, x)

    if len(slopes) == 0:
        raise UndefinedComputationError(
            "Sen's slope is undefined: every pair of observations shares the same `x` value.")

    if n_excluded:
        warnings.warn(
            f"{n_excluded} of {n * (n - 1) // 2} pairs share an `x` value and were "
            f"excluded from the Sen's slope.",
            UserWarning
        )

    return float(np.median(slopes))
