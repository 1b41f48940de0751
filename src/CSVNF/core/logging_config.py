"""
Centralized logging configuration for the CSVNF loader.

Provides functions to:
- Retrieve a standardized logger with console + rotating file handlers.
- Configure the root logger for third-party libraries (SQLAlchemy).

Log format includes timestamp, severity, module, function, line number,
and message. Rotation ensures logs don't grow indefinitely.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .settings import settings

# Track configured loggers to avoid duplicate configuration
_configured_loggers = set()

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with standardized configuration.

    Args:
        name: Logger name (typically `__name__` of the module).
        level: Overrides `settings.log_level` for this logger.

    Returns:
        Configured logger instance with console and (optionally) rotating
        file handlers.
    """
    level = (level or settings.log_level).upper()

    if name in _configured_loggers:
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers when logger is retrieved multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    # Console handler - outputs to stdout
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_dir / settings.log_file,
            maxBytes=10_485_760,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured_loggers.add(name)

    return logger


def set_level(level: str) -> None:
    """Change the level of every logger configured through `get_logger`."""
    level = level.upper()
    for name in _configured_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def setup_root_logger(level: Optional[str] = None):
    """Configure the root logger for libraries that use it."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt=_DATEFMT
    )
