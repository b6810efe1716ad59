"""Tokenizer: immutable matcher configuration shared by every scan.

A Tokenizer owns the literal trie, the compiled patterns and the
TokenizerConfig. Building one is the only fallible step; scanning is a pure
function of the tokenizer and the input.

Usage:
    >>> from lexora import Tokenizer, common
    >>> tokenizer = Tokenizer(
    ...     literals=[("add", "+"), ("sub", "-")],
    ...     patterns=[common.UNSIGNED_INT],
    ... )
    >>> [t.value for t in tokenizer.tokenize("1+20-3")]
    ['1', '+', '20', '-', '3']

Thread Safety:
Tokenizer instances are immutable after construction. Each call to
tokenize() or tokenize_lazy() creates its own Scanner, so one tokenizer can
be used from many threads at once without locking.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from lexora.config import DEFAULT_CONFIG, TokenizerConfig
from lexora.errors import BadTokenError
from lexora.patterns import CompiledPattern, compile_patterns
from lexora.scanner import Scanner
from lexora.tokens import Token
from lexora.trie import Trie
from lexora.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """Converts input text into named tokens.

    Literals are exact strings (operators, keywords); the longest one that
    matches wins. Patterns are regular expressions probed in the order given;
    the first non-empty match wins. Between the two, the longer match wins
    and config.tie_break settles equal lengths.

    Usage:
        >>> tokenizer = Tokenizer(patterns=[("digit", "[0-9]")])
        >>> tokenizer.tokenize("42")
        [Token(digit, '4', 1:1), Token(digit, '2', 1:2)]

        >>> # Builders return new tokenizers; the original is unchanged
        >>> from lexora.config import TokenizerConfig
        >>> spaced = tokenizer.with_config(TokenizerConfig(ignore_whitespace=True))

    """

    __slots__ = ("_config", "_literals", "_patterns", "_compiled", "_trie")

    def __init__(
        self,
        literals: Iterable[tuple[str, str]] = (),
        patterns: Iterable[tuple[str, str]] = (),
        *,
        config: TokenizerConfig | None = None,
    ) -> None:
        """Build the trie and compile the patterns.

        Args:
            literals: (name, literal) pairs
            patterns: (name, regex source) pairs; order sets priority and
                duplicate names are allowed
            config: Tokenizer configuration (defaults when None)

        Raises:
            InvalidPatternError: If any pattern fails to compile. No
                tokenizer is produced in that case.
        """
        self._literals = tuple(literals)
        self._patterns = tuple(patterns)
        self._config = config or DEFAULT_CONFIG
        self._compiled = compile_patterns(self._patterns)
        self._trie = Trie.build(self._literals)
        logger.debug(
            "Built tokenizer with %d literals and %d patterns",
            len(self._trie),
            len(self._compiled),
        )

    @property
    def literals(self) -> tuple[tuple[str, str], ...]:
        """The (name, literal) pairs this tokenizer was built from."""
        return self._literals

    @property
    def patterns(self) -> tuple[tuple[str, str], ...]:
        """The (name, source) pairs this tokenizer was built from."""
        return self._patterns

    @property
    def compiled_patterns(self) -> tuple[CompiledPattern, ...]:
        return self._compiled

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    def with_literals(self, literals: Iterable[tuple[str, str]]) -> Tokenizer:
        """Return a new tokenizer with literals replaced."""
        return Tokenizer(literals, self._patterns, config=self._config)

    def with_patterns(self, patterns: Iterable[tuple[str, str]]) -> Tokenizer:
        """Return a new tokenizer with patterns replaced.

        Raises:
            InvalidPatternError: If any pattern fails to compile
        """
        return Tokenizer(self._literals, patterns, config=self._config)

    def with_config(self, config: TokenizerConfig) -> Tokenizer:
        """Return a new tokenizer with config replaced."""
        return Tokenizer(self._literals, self._patterns, config=config)

    def tokenize_lazy(
        self,
        source: str,
        *,
        source_file: str | None = None,
        skip_errors: bool = False,
    ) -> Iterator[Token | BadTokenError]:
        """Tokenize source one token at a time.

        Errors are yielded as BadTokenError values, not raised. By default
        the iterator stops right after the first one. With skip_errors the
        bad character is stepped over and scanning continues, so every
        unmatched character gets reported.

        Args:
            source: Input text
            source_file: Optional source file path for error messages
            skip_errors: Continue past unmatched characters

        Returns:
            A fresh iterator; calling again restarts from the beginning.
        """
        scanner = Scanner(
            source,
            self._trie,
            self._compiled,
            self._config,
            source_file=source_file,
        )
        return scanner.scan(skip_errors=skip_errors)

    def tokenize(self, source: str, *, source_file: str | None = None) -> list[Token]:
        """Tokenize the whole source.

        Args:
            source: Input text
            source_file: Optional source file path for error messages

        Returns:
            Every token, in input order

        Raises:
            BadTokenError: At the first character nothing matches. Tokens
                produced before it are discarded.
        """
        tokens: list[Token] = []
        error: BadTokenError | None = None
        # The lazy scan ends right after its first error
        for item in self.tokenize_lazy(source, source_file=source_file):
            if isinstance(item, BadTokenError):
                error = item
            else:
                tokens.append(item)
        if error is not None:
            raise error
        return tokens

    def __repr__(self) -> str:
        return (
            f"Tokenizer(literals={len(self._literals)}, "
            f"patterns={len(self._compiled)}, config={self._config!r})"
        )
