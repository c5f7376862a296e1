"""
Exceptions raised by the mktrend statistics.
"""


class InvalidInputError(ValueError):
    """Raised when the inputs cannot describe a valid series (bad lengths, non-finite values)."""


class UndefinedComputationError(ArithmeticError):
    """Raised when a statistic is undefined for otherwise valid inputs."""
