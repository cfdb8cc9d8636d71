"""Logging setup."""

import sys

from loguru import logger

LOG_FORMAT = "{level}: {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Send log messages at ``level`` and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
