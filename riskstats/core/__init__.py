"""
Core module: Configuration, logging, validation and exception handling.
"""

from .config import Config, config
from .exceptions import (
    AnalyticsError,
    ConfigurationError,
    InvalidArgumentError,
    LengthMismatchError,
)
from .logging_config import setup_logging

__all__ = [
    "Config",
    "config",
    "setup_logging",
    "AnalyticsError",
    "ConfigurationError",
    "InvalidArgumentError",
    "LengthMismatchError",
]
