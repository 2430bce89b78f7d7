"""Minimal logging utilities for penmode.

Provides a simple get_logger function that wraps the standard library logging,
plus configure_logging for applying a configured level name.

Example:
    >>> from penmode.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Pen mode enabled")
"""

from __future__ import annotations

import logging

from penmode.errors import ConfigError

# Level names accepted in configuration, mapped to stdlib levels
LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "penmode." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'penmode.mymodule'
    """
    if not (name == "penmode" or name.startswith("penmode.")):
        name = f"penmode.{name}"
    return logging.getLogger(name)


def configure_logging(level: str) -> logging.Logger:
    """Set the level of the root ``penmode`` logger.

    No handlers are installed; output routing belongs to the host.

    Args:
        level: One of "debug", "info", "warn", "error"

    Returns:
        The root penmode logger

    Raises:
        ConfigError: If the level name is not recognized
    """
    if level not in LOG_LEVELS:
        available = ", ".join(LOG_LEVELS)
        raise ConfigError("log_level", f"unknown level {level!r}. Available: {available}")
    logger = get_logger("penmode")
    logger.setLevel(LOG_LEVELS[level])
    return logger
