"""Minimal logging utilities for statelex.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from statelex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scan halted")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "statelex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'statelex.mymodule'
    """
    if not (name == "statelex" or name.startswith("statelex.")):
        name = f"statelex.{name}"
    return logging.getLogger(name)
