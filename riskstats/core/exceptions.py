"""
Custom exceptions for the riskstats analytics engine.

Only shape and domain violations are errors. Degenerate numeric input
(empty sequences, zero variance, zero MAD) resolves to documented zero or
empty results and never raises.
"""


class AnalyticsError(Exception):
    """Base exception for analytics failures."""
    pass


class InvalidArgumentError(AnalyticsError, ValueError):
    """Raised when a parameter or input element is outside its documented domain."""
    pass


class LengthMismatchError(AnalyticsError, ValueError):
    """Raised when paired sequences do not have equal length."""
    pass


class ConfigurationError(AnalyticsError):
    """Raised when configuration is invalid or missing."""
    pass
