"""Exception classes for Lexora.

Two failure kinds exist:

- InvalidPatternError: a pattern could not be compiled while building a
  Tokenizer. Never raised mid-scan.
- BadTokenError: no literal or pattern matched at a position. Raised by
  Tokenizer.tokenize() and yielded (not raised) by Tokenizer.tokenize_lazy().
"""

from __future__ import annotations


class LexoraError(Exception):
    """Base exception for all Lexora errors.

    Subclass this for specific error categories.
    """

    pass


class BadTokenError(LexoraError):
    """No literal or pattern matched the input at a position.

    The input is valid up to ``position``; callers decide whether to abort,
    skip the character, or report it.
    """

    def __init__(
        self,
        character: str,
        position: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize bad token error with its location.

        Args:
            character: The unmatched character, as found in the original input
            position: Character index (not byte index) in the original input
            lineno: Line number of the character (1-indexed)
            col_offset: Column of the character (1-indexed)
            source_file: Path to source file (optional)
        """
        self.character = character
        self.position = position
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(
            f"{location}unexpected character {character!r} at position {position}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadTokenError):
            return NotImplemented
        return (self.character, self.position) == (other.character, other.position)

    def __hash__(self) -> int:
        return hash((self.character, self.position))


class InvalidPatternError(LexoraError):
    """A named pattern failed to compile.

    The underlying ``re.error`` is available as ``cause`` and is chained
    as ``__cause__`` when raised by the pattern compiler.
    """

    def __init__(self, name: str, pattern: str, cause: Exception) -> None:
        """Initialize invalid pattern error.

        Args:
            name: Name of the offending pattern
            pattern: The pattern source as compiled (after anchor stripping)
            cause: The compiler diagnostic
        """
        self.name = name
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"Pattern '{name}' ({pattern!r}): {cause}")
