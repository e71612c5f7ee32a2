"""Minimal logging utilities for fluent_string.

Provides a simple get_logger function that wraps the standard library logging.
Buffers report capacity changes and failed reservations at DEBUG.

Example:
    >>> from fluent_string.utils.logger import get_logger
    >>> logger = get_logger("buffer")
    >>> logger.debug("capacity %d -> %d (length=%d)", 0, 8, 0)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fluent_string." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("buffer").name
        'fluent_string.buffer'
        >>> get_logger("fluent_string.buffer") is get_logger("buffer")
        True
    """
    if not (name == "fluent_string" or name.startswith("fluent_string.")):
        name = f"fluent_string.{name}"
    return logging.getLogger(name)
