"""Where a token or bad character sits in the original input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a token in the original input.

    Line and column are 1-indexed; offsets are 0-indexed character indices,
    never byte indices.

    Attributes:
        lineno: Line of the first character (1-indexed)
        col_offset: Column of the first character (1-indexed)
        offset: Start character index in the original input
        end_offset: End character index (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=15)
            >>> str(loc)
            '2:5'
            >>> loc.length
            3

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    @property
    def length(self) -> int:
        """Number of original characters covered."""
        return max(self.end_offset - self.offset, 0)

    def __str__(self) -> str:
        """Render as "file:line:col", or "line:col" without a file."""
        where = f"{self.lineno}:{self.col_offset}"
        return f"{self.source_file}:{where}" if self.source_file else where

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Location covering this one through the end of another.

        Useful to a parser that groups several tokens into one node.
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )
