"""
Internal helpers shared by the Mann-Kendall and Sen's slope routines.
"""

import numpy as np
import pandas as pd

from .exceptions import InvalidInputError, UndefinedComputationError


def _is_datetime_like(x):
    """Checks if an array is datetime-like."""
    return np.issubdtype(x.dtype, np.datetime64) or \
           (x.dtype == 'O' and len(x) > 0 and hasattr(x[0], 'year'))


def _to_float_array(values, name='x', allow_datetime=False):
    """
    Converts an array-like to a 1-D float64 numpy array.

    pandas objects are unwrapped first. Datetime-like input is converted
    to seconds since the epoch when `allow_datetime` is True.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        values = values.to_numpy()
    arr = np.asarray(values)

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr.flatten()
    if arr.ndim != 1:
        raise InvalidInputError(f"`{name}` must be one-dimensional, got shape {arr.shape}.")

    if _is_datetime_like(arr):
        if not allow_datetime:
            raise InvalidInputError(f"`{name}` must be numeric, not datetime-like.")
        dt_index = pd.to_datetime(arr)
        if dt_index.isna().any():
            raise InvalidInputError(f"`{name}` contains missing (NaT) timestamps.")
        if dt_index.tz is not None:
            dt_index = dt_index.tz_convert(None)
        arr = dt_index.values.astype('datetime64[ns]').astype(np.int64) / 10**9

    try:
        arr = arr.astype(float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"`{name}` must contain real numbers.") from exc

    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"`{name}` contains NaN or infinite values.")
    return arr


def _check_min_length(arr, minimum, name='x'):
    if len(arr) < minimum:
        raise InvalidInputError(
            f"`{name}` must have at least {minimum} observations, got {len(arr)}.")


def _as_integer_score(s):
    """Validates that the Mann-Kendall score is integral and returns it as an int."""
    if isinstance(s, (bool, np.bool_)):
        raise InvalidInputError("`s` must be an integer, not a boolean.")
    if isinstance(s, (int, np.integer)):
        return int(s)
    if isinstance(s, (float, np.floating)) and np.isfinite(s) and float(s).is_integer():
        return int(s)
    raise InvalidInputError(f"`s` must be an integer Mann-Kendall score, got {s!r}.")


def _pair_indices(n):
    """Index arrays (i, j) enumerating every unordered pair with i < j exactly once."""
    return np.triu_indices(n, k=1)


def _tie_counts(x):
    """Multiplicities of the distinct values of `x` that occur more than once."""
    _, counts = np.unique(x, return_counts=True)
    return counts[counts > 1]


def _z_score(s, var_s):
    """
    Continuity-corrected standard score of the Mann-Kendall statistic.

    Raises UndefinedComputationError when a non-zero score would have to be
    divided by a non-positive variance.
    """
    if s == 0:
        return 0.0
    if not var_s > 0:
        raise UndefinedComputationError(
            f"Variance of S is {var_s}; the z-score is undefined for S={s}.")

    if s > 0:
        return (s - 1) / np.sqrt(var_s)
    return (s + 1) / np.sqrt(var_s)
