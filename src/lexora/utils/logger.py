"""Minimal logging utilities for Lexora.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lexora.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Built tokenizer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lexora." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'lexora.scanner'
    """
    if not (name == "lexora" or name.startswith("lexora.")):
        name = f"lexora.{name}"
    return logging.getLogger(name)
