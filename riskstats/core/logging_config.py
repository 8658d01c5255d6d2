"""
Logging configuration for host applications.

The library itself only emits records through module loggers; call
setup_logging() from an application to attach console (and optionally
rotating file) output to the package logger.
"""

import logging
import logging.handlers
from typing import Optional

from .config import Config, config
from .exceptions import ConfigurationError


def setup_logging(
    logger_name: str = "riskstats", settings: Optional[Config] = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        logger_name: Name of the logger (the package logger by default)
        settings: Config to read level and logs_dir from (global config if None)

    Returns:
        Configured logger instance
    """
    settings = settings or config
    logger = logging.getLogger(logger_name)

    # Don't add handlers if logger already configured
    if logger.handlers:
        return logger

    try:
        logger.setLevel(settings.log_level)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid log level: {settings.log_level!r}") from exc

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.logs_dir is not None:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = settings.logs_dir / f"{logger_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(settings.log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
