"""Utility modules for Lexora.

Provides:
- logger: get_logger for logging
- text: CRLF normalization with an offset map back to the original input
"""

from lexora.utils.logger import get_logger
from lexora.utils.text import normalize_crlf

__all__ = [
    "get_logger",
    "normalize_crlf",
]
