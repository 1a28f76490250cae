"""
Logging utilities shared by the selector core, the API and the scripts.
"""

import logging
import sys
from typing import Optional
from src.config import Config


def setup_logger(
    name: str,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with the project's handler and format.

    Records go to stderr so that scripts can print rankings on stdout
    without log lines mixed in.

    Args:
        name: Logger name (typically __name__)
        level: Logging level name (defaults to Config.LOG_LEVEL)
        format_string: Custom format string (defaults to Config.LOG_FORMAT)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # One handler per logger, even when called repeatedly
    if logger.handlers:
        return logger

    level_value = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_value)
    handler.setFormatter(logging.Formatter(format_string or Config.LOG_FORMAT))

    logger.setLevel(level_value)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger, configuring it on first use.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger
