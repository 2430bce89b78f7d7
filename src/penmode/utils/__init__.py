"""Utility modules for penmode.

Provides:
- logger: get_logger, configure_logging
"""

from penmode.utils.logger import LOG_LEVELS, configure_logging, get_logger

__all__ = [
    "LOG_LEVELS",
    "configure_logging",
    "get_logger",
]
