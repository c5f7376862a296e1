"""
mktrend: statistics for the Mann-Kendall monotonic trend test.

This package provides Sen's slope estimator, the Mann-Kendall S statistic
and the variance of S corrected for ties and serial autocorrelation, with
the resulting standardized scores.
"""
from .sen_slope import sen_slope
from .kendall_s import kendall_s
from .variance_s import variance_s, VarianceResult
from .trend_statistics import trend_statistics
from .exceptions import InvalidInputError, UndefinedComputationError

__all__ = [
    'sen_slope',
    'kendall_s',
    'variance_s',
    'VarianceResult',
    'trend_statistics',
    'InvalidInputError',
    'UndefinedComputationError',
]
