"""Minimal logging utilities for Parsley.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from parsley.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "parsley." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'parsley.mymodule'
    """
    if not (name == "parsley" or name.startswith("parsley.")):
        name = f"parsley.{name}"
    return logging.getLogger(name)
