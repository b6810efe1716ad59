"""Single-use scanner driving one tokenization pass.

At every position the scanner probes the literal trie and the compiled
patterns, picks a winner, emits a Token and commits the cursor. When
nothing matches it reports a BadTokenError carrying the exact character
and position.

Positions, values and line/column numbers always refer to the original
input. With CRLF conversion the scanner matches against converted text and
translates offsets back through the map from normalize_crlf().

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; the trie and patterns are only read.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

from lexora.config import DEFAULT_CONFIG, TieBreak
from lexora.errors import BadTokenError
from lexora.profiling import get_tokenize_accumulator
from lexora.tokens import Token
from lexora.utils.logger import get_logger
from lexora.utils.text import normalize_crlf

if TYPE_CHECKING:
    from lexora.config import TokenizerConfig
    from lexora.patterns import CompiledPattern
    from lexora.trie import Trie

logger = get_logger(__name__)


class MatchKind(Enum):
    """Which matcher produced a candidate."""

    LITERAL = auto()
    PATTERN = auto()


class Match(NamedTuple):
    """A candidate token at the current position."""

    kind: MatchKind
    length: int
    name: str


def select_match(
    literal: Match | None,
    pattern: Match | None,
    tie_break: TieBreak = TieBreak.LITERAL,
) -> Match | None:
    """Pick the winner between a literal and a pattern candidate.

    The longer match wins. On equal length tie_break decides.
    """
    if literal is None:
        return pattern
    if pattern is None:
        return literal
    if literal.length != pattern.length:
        return literal if literal.length > pattern.length else pattern
    return literal if tie_break is TieBreak.LITERAL else pattern


class Scanner:
    """Walks one input left to right, yielding tokens or bad tokens.

    Usage:
            >>> from lexora.patterns import compile_patterns
            >>> from lexora.trie import Trie
            >>> scanner = Scanner("1+2", Trie.build([("add", "+")]),
            ...                   compile_patterns([("digit", "[0-9]")]))
            >>> [t.name for t in scanner.scan()]
            ['digit', 'add', 'digit']

    """

    __slots__ = (
        "_source",
        "_text",
        "_text_len",  # Cached len(text) to avoid repeated calls
        "_origin",  # Converted offset -> original offset, None for identity
        "_pos",  # Offset into _text
        "_lineno",
        "_col",
        "_source_file",
        "_trie",
        "_patterns",
        "_skipped",
        "_tie_break",
    )

    def __init__(
        self,
        source: str,
        trie: Trie,
        patterns: tuple[CompiledPattern, ...],
        config: TokenizerConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner with source text and a prepared matcher set.

        Args:
            source: Input text
            trie: Literal trie
            patterns: Compiled patterns, in priority order
            config: Tokenizer configuration (defaults when None)
            source_file: Optional source file path for error messages
        """
        if config is None:
            config = DEFAULT_CONFIG

        self._source = source
        if config.convert_crlf:
            self._text, self._origin = normalize_crlf(source)
        else:
            self._text, self._origin = source, None
        self._text_len = len(self._text)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._trie = trie
        self._patterns = patterns
        self._skipped = config.skipped_characters
        self._tie_break = config.tie_break

    def scan(self, *, skip_errors: bool = False) -> Iterator[Token | BadTokenError]:
        """Scan the whole input.

        Args:
            skip_errors: After yielding a BadTokenError, step over the bad
                character and keep scanning instead of stopping.

        Yields:
            Token objects, and BadTokenError values where nothing matched.

        Complexity: O(n * (k + p)) where n = len(source), k = longest
        literal and p = cost of probing every pattern
        """
        text = self._text
        text_len = self._text_len
        skipped = self._skipped
        token_count = 0
        error_count = 0

        while self._pos < text_len:
            if text[self._pos] in skipped:
                self._commit(1)
                continue

            match = self._match_here()
            if match is None:
                error_count += 1
                error = self._make_error()
                yield error
                if not skip_errors:
                    break
                logger.debug(
                    "Skipping unmatched character %r at %d", error.character, error.position
                )
                self._commit(1)
                continue

            token_count += 1
            yield self._make_token(match)
            self._commit(match.length)

        acc = get_tokenize_accumulator()
        if acc is not None:
            acc.record_scan(len(self._source), token_count, error_count)

    # =========================================================================
    # Matching
    # =========================================================================

    def _match_here(self) -> Match | None:
        """Best candidate at the current position, or None."""
        text = self._text
        pos = self._pos

        literal = None
        if self._trie:
            found = self._trie.longest_match(text, pos)
            if found is not None:
                literal = Match(MatchKind.LITERAL, found[0], found[1])

        pattern = None
        for compiled in self._patterns:
            length = compiled.match_at(text, pos)
            # Empty matches never advance the cursor
            if length:
                pattern = Match(MatchKind.PATTERN, length, compiled.name)
                break

        return select_match(literal, pattern, self._tie_break)

    # =========================================================================
    # Position tracking
    # =========================================================================

    def _original(self, offset: int) -> int:
        """Translate an offset in the matched text to the original input."""
        if self._origin is None:
            return offset
        return self._origin[offset]

    def _commit(self, length: int) -> None:
        """Advance the cursor by length converted characters.

        Line and column follow the original input; CR+LF counts as one
        line break.
        """
        start = self._original(self._pos)
        end = self._original(self._pos + length)
        segment = self._source[start:end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos += length

    def _make_token(self, match: Match) -> Token:
        start = self._original(self._pos)
        end = self._original(self._pos + match.length)
        return Token(
            name=match.name,
            value=self._source[start:end],
            position=start,
            lineno=self._lineno,
            col=self._col,
            source_file=self._source_file,
        )

    def _make_error(self) -> BadTokenError:
        position = self._original(self._pos)
        return BadTokenError(
            self._source[position],
            position,
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )
