"""Tokenizer configuration for Lexora.

Config is an immutable value held by a Tokenizer. It is set once when the
tokenizer is built and read by every scan, so one tokenizer can be shared
across threads.

Usage:
    from lexora import Tokenizer, TokenizerConfig, TieBreak

    config = TokenizerConfig(ignore_whitespace=True, tie_break=TieBreak.PATTERN)
    tokenizer = Tokenizer(patterns=[("word", "[a-z]+")], config=config)

    # Or from plain data (e.g. a TOML/YAML section)
    config = TokenizerConfig.from_dict({"convert_crlf": False})

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Characters dropped when ignore_whitespace is enabled
WHITESPACE = frozenset(" \t\n\r\x0b\x0c")


class TieBreak(Enum):
    """Winner when a literal and a pattern match the same length.

    LITERAL: Literals are exact, intentional tokens (keywords, operators)
        and are not shadowed by a looser pattern. Default.
    PATTERN: The first matching pattern wins.

    """

    LITERAL = "literal"
    PATTERN = "pattern"


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        convert_crlf: Treat CR+LF in the input as a single LF while matching.
            Token values and positions still refer to the original input.
        ignored_characters: Characters skipped between tokens
        ignore_whitespace: Also skip spaces, tabs, newlines, CR, VT and FF
        tie_break: Literal/pattern winner on equal match length

    """

    convert_crlf: bool = True
    ignored_characters: frozenset[str] = field(default_factory=frozenset)
    ignore_whitespace: bool = False
    tie_break: TieBreak = TieBreak.LITERAL

    def __post_init__(self) -> None:
        # Accept any iterable of characters (e.g. a plain string or list)
        if not isinstance(self.ignored_characters, frozenset):
            object.__setattr__(
                self, "ignored_characters", frozenset(self.ignored_characters)
            )
        if not isinstance(self.tie_break, TieBreak):
            object.__setattr__(self, "tie_break", TieBreak(self.tie_break))

    @property
    def skipped_characters(self) -> frozenset[str]:
        """Every character the scanner skips between tokens."""
        if self.ignore_whitespace:
            return self.ignored_characters | WHITESPACE
        return self.ignored_characters

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> TokenizerConfig:
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored. ``tie_break`` may be given as its string value.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TokenizerConfig attribute names.

        Returns:
            New TokenizerConfig instance with values from dict.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "ignored_characters": " ,",
            ...     "tie_break": "pattern",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tie_break
            <TieBreak.PATTERN: 'pattern'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "TieBreak",
    "TokenizerConfig",
    "WHITESPACE",
]
