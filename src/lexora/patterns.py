"""Pattern compiler: anchor forcing and compilation of named patterns.

The dispatcher probes every pattern at a fixed offset, so a pattern must
never accept a match that starts later in the text. Anchor forcing removes
every caret that acts as an anchor and wraps the rest as ``^(?:...)``.

Python's ``re`` treats ``^`` as "start of string" even when ``Pattern.match``
is given a ``pos``, while ``Pattern.match`` itself only ever matches at
``pos``. The compiled regex is therefore built from the bare ``(?:...)``
group and the leading caret lives on in ``CompiledPattern.source``. A
leading global flag group such as ``(?i)`` is moved in front of that group,
since ``re`` only accepts global flags at the very start of an expression.

Probing with ``match(text, pos)`` does not slice the text. Lookbehind and
``\\b`` still see the characters before ``pos``, so ``\\bfoo`` does not match
the ``foo`` in ``xfoo``.

Example:
    >>> force_start_anchor(r"x|^y")
    '^(?:x|y)'
    >>> (digit,) = compile_patterns([("digit", "[0-9]")])
    >>> digit.match_at("a1", 1)
    1
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from lexora.errors import InvalidPatternError

# A caret right after one of these is class negation or an escaped literal
_CARET_KEEPERS = frozenset("[\\")

# Global inline flags, e.g. (?i) or (?ms), at the start of a pattern
_LEADING_FLAGS = re.compile(r"(?:\(\?[aiLmsux]+\))+")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A named pattern ready for dispatch.

    Attributes:
        name: Token name emitted on a match
        source: Anchored pattern text, always of the form ``^(?:...)``
        regex: Compiled matcher; only probed with ``regex.match(text, pos)``

    """

    name: str
    source: str
    regex: re.Pattern[str]

    def match_at(self, text: str, pos: int) -> int | None:
        """Length of the match starting exactly at pos, or None."""
        m = self.regex.match(text, pos)
        if m is None:
            return None
        return m.end() - pos


def strip_anchors(pattern: str) -> str:
    """Remove every caret that is neither escaped nor negating a class.

    Carets are removed anywhere in the pattern, not only at the front, so
    alternation branches like ``^x|^y`` lose theirs too. Nested groups and
    lookarounds get no special treatment.
    """
    kept: list[str] = []
    prev = ""
    for char in pattern:
        if not (char == "^" and prev not in _CARET_KEEPERS):
            kept.append(char)
        prev = char
    return "".join(kept)


def force_start_anchor(pattern: str) -> str:
    """Rewrite pattern so it can only match at the probed position.

    Args:
        pattern: Pattern source as written by the caller

    Returns:
        ``^(?:<pattern without anchors>)``

    Examples:
        >>> force_start_anchor(r"^\\d+")
        '^(?:\\\\d+)'
        >>> force_start_anchor("ba[^rz]")
        '^(?:ba[^rz])'
    """
    return f"^(?:{strip_anchors(pattern)})"


def compile_patterns(
    patterns: Iterable[tuple[str, str]],
) -> tuple[CompiledPattern, ...]:
    """Anchor and compile named patterns, preserving their order.

    Duplicate names are legal and compiled independently. Compilation is
    all-or-nothing: the first pattern that fails aborts the whole batch.

    Args:
        patterns: (name, source) pairs

    Returns:
        Tuple of CompiledPattern in input order

    Raises:
        InvalidPatternError: If any pattern fails to compile
    """
    compiled: list[CompiledPattern] = []
    for name, source in patterns:
        anchored = force_start_anchor(source)
        cleaned = strip_anchors(source)
        flags = _LEADING_FLAGS.match(cleaned)
        if flags is None:
            body = anchored[1:]
        else:
            body = f"{flags.group()}(?:{cleaned[flags.end():]})"
        try:
            regex = re.compile(body)
        except re.error as exc:
            raise InvalidPatternError(name, anchored, exc) from exc
        compiled.append(CompiledPattern(name=name, source=anchored, regex=regex))
    return tuple(compiled)
