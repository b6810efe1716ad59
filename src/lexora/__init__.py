"""
Lexora: Configurable Lexical Scanner for Python

Turns text into named, positioned tokens from a set of exact literals
(operators, keywords) and regular-expression patterns (numbers, names,
strings). A building block for parsers: no grammar, no recursion.

Quick Start:
    >>> from lexora import Tokenizer, common
    >>> tokenizer = Tokenizer(
    ...     literals=[("plus", "+"), ("incr", "++"), ("let", "let")],
    ...     patterns=[common.C_NAME, common.UNSIGNED_INT],
    ... )
    >>> [(t.name, t.value) for t in tokenizer.tokenize("let++1")]
    [('let', 'let'), ('incr', '++'), ('unsigned_int', '1')]

Error Handling:
    >>> from lexora import BadTokenError
    >>> try:
    ...     tokenizer.tokenize("1?2")
    ... except BadTokenError as e:
    ...     print(e.character, e.position)
    ? 1

Installation:
    pip install lexora              # Zero runtime dependencies
"""

from collections.abc import Iterable

from lexora import common
from lexora.config import TieBreak, TokenizerConfig
from lexora.errors import BadTokenError, InvalidPatternError, LexoraError
from lexora.location import SourceLocation
from lexora.patterns import CompiledPattern, compile_patterns, force_start_anchor
from lexora.profiling import (
    TokenizeAccumulator,
    get_tokenize_accumulator,
    profiled_tokenize,
)
from lexora.scanner import Match, MatchKind, Scanner
from lexora.tokenizer import Tokenizer
from lexora.tokens import Token
from lexora.trie import Trie, TrieNode

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    literals: Iterable[tuple[str, str]] = (),
    patterns: Iterable[tuple[str, str]] = (),
    config: TokenizerConfig | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize source with a one-off tokenizer.

    Builds a Tokenizer on every call. For repeated scans build the
    Tokenizer once and reuse it.

    Args:
        source: Input text
        literals: (name, literal) pairs
        patterns: (name, regex source) pairs, in priority order
        config: Tokenizer configuration (defaults when None)
        source_file: Optional source file path for error messages

    Returns:
        Every token, in input order

    Raises:
        InvalidPatternError: If a pattern fails to compile
        BadTokenError: At the first character nothing matches

    Example:
        >>> [t.value for t in tokenize("a1", patterns=[common.LETTER, common.DIGIT])]
        ['a', '1']
    """
    tokenizer = Tokenizer(literals, patterns, config=config)
    return tokenizer.tokenize(source, source_file=source_file)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Tokenizer",
    "Token",
    "SourceLocation",
    # Pattern catalog
    "common",
    # Configuration
    "TieBreak",
    "TokenizerConfig",
    # Errors
    "LexoraError",
    "BadTokenError",
    "InvalidPatternError",
    # Engine components
    "CompiledPattern",
    "compile_patterns",
    "force_start_anchor",
    "Trie",
    "TrieNode",
    "Scanner",
    "Match",
    "MatchKind",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
]
