"""Token definition for the Lexora tokenizer.

Each Token has the name of the literal or pattern that produced it, the exact
matched substring of the original input, and its start position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

from lexora.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    The value is never post-processed: string escapes and numeric text are
    left exactly as they appear in the input.

    Attributes:
        name: Name of the literal or pattern that matched
        value: The matched substring of the original input
        position: Character index of the token start in the original input
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        source_file: Optional source file path

    """

    name: str
    value: str
    position: int = 0
    lineno: int = 1
    col: int = 1
    source_file: str | None = None

    @property
    def end(self) -> int:
        """Character index just past the token in the original input."""
        return self.position + len(self.value)

    @property
    def location(self) -> SourceLocation:
        """Source location of this token."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.position,
            end_offset=self.end,
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.name}, {val!r}, {self.lineno}:{self.col})"
