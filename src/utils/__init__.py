"""
Utility modules for the mining method selector.
"""

from .logging_utils import setup_logger, get_logger

__all__ = [
    "setup_logger",
    "get_logger",
]

