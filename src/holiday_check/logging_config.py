"""Logging configuration for the holiday check service.

Usage:
    ```python
    from holiday_check.logging_config import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)

    logger.info("Loaded %d holidays", 6)
    ```
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the package logger with a human-readable stream handler.

    Calling this more than once only updates the level.

    Args:
        level: Log level name ("DEBUG", "INFO", ...) or numeric level.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger("holiday_check")
    root.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)
