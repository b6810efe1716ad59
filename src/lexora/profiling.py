"""Lexora TokenizeAccumulator: opt-in profiling for tokenization.

Accumulates, across every scan that runs to completion inside the
profiled block:
- Number of scans
- Characters scanned
- Tokens emitted
- Bad tokens reported

Zero overhead when disabled (get_tokenize_accumulator() returns None).
A lazy scan abandoned by its consumer before the end is not recorded.

Example:
    from lexora import Tokenizer
    from lexora.profiling import profiled_tokenize

    tokenizer = Tokenizer(patterns=[("digit", "[0-9]")])
    with profiled_tokenize() as metrics:
        tokenizer.tokenize("0123")

    print(metrics.summary())
    # {"total_ms": 0.1, "scans": 1, "source_length": 4, "token_count": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        scans: Number of scans recorded.
        source_length: Total characters of input scanned.
        token_count: Total tokens emitted.
        error_count: Total bad tokens reported.

    """

    start_time: float = field(default_factory=perf_counter)
    scans: int = 0
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0

    def record_scan(self, source_length: int, token_count: int, error_count: int) -> None:
        """Record a finished scan.

        Args:
            source_length: Length of the input string.
            token_count: Number of tokens emitted.
            error_count: Number of bad tokens reported.

        """
        self.scans += 1
        self.source_length += source_length
        self.token_count += token_count
        self.error_count += error_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, scans, source_length, token_count, error_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scans": self.scans,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator that will be populated by scans.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
