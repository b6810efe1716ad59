"""Ready-made patterns for common token classes.

Each constant is a ``(name, source)`` pair that can be passed straight to
``Tokenizer(patterns=...)``. Values are matched text only; unescaping
strings and parsing numbers is up to the caller.

Example:
    >>> from lexora import Tokenizer, common
    >>> tokenizer = Tokenizer(patterns=[common.NUMBER, common.C_NAME])
    >>> [(t.name, t.value) for t in tokenizer.tokenize("x1-2.5")]
    [('c_name', 'x1'), ('number', '-2.5')]

Underscores are accepted as digit separators in every numeric pattern, but
never at the start or end of a digit run (``1_000`` and ``1__0`` match,
``_1`` and ``1_`` do not).
"""

from __future__ import annotations

_STRING_BASE = r"(?:\\.|[^\\])*?"
_INT_BASE = r"[0-9](?:[0-9_]*[0-9])?"
_EXPONENT = rf"[eE][+\-]?{_INT_BASE}"
_FLOAT_BASE = (
    rf"{_INT_BASE}(?:{_EXPONENT})"  # integer part, exponent required
    r"|"
    rf"(?:{_INT_BASE}\.(?:{_INT_BASE})?|\.{_INT_BASE})"  # mantissa
    rf"(?:{_EXPONENT})?"
)

# Strings and characters
CHAR = ("char", r"'(?:\\'|[^'])'")
"""A single character in single quotes (``'h'``, ``'\\''``)."""
SINGLE_QUOTED_STRING = ("single_quoted_string", f"'{_STRING_BASE}'")
"""A string in single quotes (``'nice fish'``). Backslash escapes are kept."""
DOUBLE_QUOTED_STRING = ("double_quoted_string", f'"{_STRING_BASE}"')
"""A string in double quotes (``"hello there"``). Backslash escapes are kept."""
STRING = ("string", f"\"{_STRING_BASE}\"|\\'{_STRING_BASE}'")
"""A string in either single or double quotes."""

# Words and names
LETTER = ("letter", r"[A-Za-z]")
"""An English letter, either case."""
WORD = ("word", r"[A-Za-z]+(-[A-Za-z]+)*")
"""An English word (``thread-safe``); hyphens only between letters."""
C_NAME = ("c_name", r"[_A-Za-z][_A-Za-z\d]*")
"""A C-like identifier (``crossing_rocks``); cannot start with a digit."""

NEWLINE = ("newline", r"\r?\n")
"""A newline, ``\\n`` or ``\\r\\n``."""

# Numbers
DIGIT = ("digit", r"[0-9]")
HEXDIGIT = ("hexdigit", r"[0-9A-Fa-f]")
UNSIGNED_INT = ("unsigned_int", _INT_BASE)
"""An unsigned integer (``2_137``)."""
SIGNED_INT = ("signed_int", rf"[+\-]{_INT_BASE}")
"""An integer with a mandatory sign (``-1``)."""
DECIMAL = ("decimal", rf"{_INT_BASE}\.(?:{_INT_BASE})?|\.{_INT_BASE}")
"""A decimal without exponent (``3.14``, ``3.``, ``.5``)."""
UNSIGNED_FLOAT = ("unsigned_float", _FLOAT_BASE)
"""An unsigned float (``1e3``, ``1.``, ``.5e-2``); plain integers do not match."""
SIGNED_FLOAT = ("signed_float", rf"[+\-](?:{_FLOAT_BASE})")
UNSIGNED_NUMBER = ("unsigned_number", f"{_FLOAT_BASE}|{_INT_BASE}")
"""An unsigned integer or float."""
SIGNED_NUMBER = ("signed_number", rf"[+\-](?:(?:{_FLOAT_BASE})|{_INT_BASE})")
INT = ("int", rf"[+\-]?{_INT_BASE}")
"""An integer with an optional sign."""
FLOAT = ("float", rf"[+\-]?(?:{_FLOAT_BASE})")
"""A float with an optional sign."""
NUMBER = ("number", rf"[+\-]?(?:(?:{_FLOAT_BASE})|{_INT_BASE})")
"""An integer or float with an optional sign."""

CATALOG: dict[str, str] = dict(
    [
        CHAR,
        SINGLE_QUOTED_STRING,
        DOUBLE_QUOTED_STRING,
        STRING,
        LETTER,
        WORD,
        C_NAME,
        NEWLINE,
        DIGIT,
        HEXDIGIT,
        UNSIGNED_INT,
        SIGNED_INT,
        DECIMAL,
        UNSIGNED_FLOAT,
        SIGNED_FLOAT,
        UNSIGNED_NUMBER,
        SIGNED_NUMBER,
        INT,
        FLOAT,
        NUMBER,
    ]
)
"""Every catalog pattern, keyed by name."""


__all__ = [
    "CATALOG",
    "CHAR",
    "C_NAME",
    "DECIMAL",
    "DIGIT",
    "DOUBLE_QUOTED_STRING",
    "FLOAT",
    "HEXDIGIT",
    "INT",
    "LETTER",
    "NEWLINE",
    "NUMBER",
    "SIGNED_FLOAT",
    "SIGNED_INT",
    "SIGNED_NUMBER",
    "SINGLE_QUOTED_STRING",
    "STRING",
    "UNSIGNED_FLOAT",
    "UNSIGNED_INT",
    "UNSIGNED_NUMBER",
    "WORD",
]
