"""Text utilities for Lexora.

Example:
    >>> from lexora.utils.text import normalize_crlf
    >>> normalize_crlf("a\\r\\nb")
    ('a\\nb', [0, 1, 3, 4])
"""

from __future__ import annotations


def normalize_crlf(source: str) -> tuple[str, list[int] | None]:
    """Collapse every CR+LF pair in source into a single LF.

    Returns the converted text together with an offset map: ``origin[i]`` is
    the index in ``source`` of converted character ``i``, and the map holds
    one trailing entry equal to ``len(source)`` so that end offsets translate
    too. A CR+LF pair maps to the index of its CR, so slicing ``source`` with
    translated offsets yields the original ``"\\r\\n"``.

    When source contains no CR+LF pair the text is returned unchanged and the
    map is None (identity).

    Args:
        source: Original input text

    Returns:
        (converted_text, origin) tuple

    Examples:
        >>> normalize_crlf("plain")
        ('plain', None)
        >>> normalize_crlf("\\r\\n")
        ('\\n', [0, 2])
    """
    if "\r\n" not in source:
        return source, None

    chars: list[str] = []
    origin: list[int] = []
    pos = 0
    source_len = len(source)
    while pos < source_len:
        char = source[pos]
        origin.append(pos)
        if char == "\r" and pos + 1 < source_len and source[pos + 1] == "\n":
            chars.append("\n")
            pos += 2
        else:
            chars.append(char)
            pos += 1
    origin.append(source_len)
    return "".join(chars), origin
