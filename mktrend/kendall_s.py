"""
This script provides the Mann-Kendall S statistic.
"""
import numpy as np

from ._utils import _to_float_array, _check_min_length


def kendall_s(x):
    """
    Mann-Kendall score S = sum over i < j of sign(x[j] - x[i]).

    A positive score indicates an increasing trend, a negative score a
    decreasing one. Tied pairs contribute zero.

    Input:
        x: a vector of data, in time order.
    Output:
        S as a Python int.
    """
    x = _to_float_array(x, name='x')
    _check_min_length(x, 2, name='x')

    n = len(x)
    s = 0
    for k in range(n - 1):
        s += int(np.sum(np.sign(x[k + 1:n] - x[k])))
    return s
