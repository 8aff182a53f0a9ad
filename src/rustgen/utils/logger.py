"""Minimal logging utilities for rustgen.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from rustgen.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering scope")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "rustgen." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'rustgen.mymodule'
    """
    if not (name == "rustgen" or name.startswith("rustgen.")):
        name = f"rustgen.{name}"
    return logging.getLogger(name)
