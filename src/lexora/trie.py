"""Prefix tree for longest-literal matching.

Literals such as operators and keywords are stored character by character.
A node can be terminal (a literal ends there) and still have children (a
longer literal continues through it), so ``+`` and ``+++`` share a path.

Thread Safety:
A Trie is built once and never mutated afterwards. Lookups only read, so
one instance can serve any number of concurrent scans.

"""

from __future__ import annotations

from collections.abc import Iterable


class TrieNode:
    """One node of the literal trie.

    Attributes:
        value: Token name if a literal ends at this node, else None
        children: Outgoing edges keyed by a single character

    """

    __slots__ = ("value", "children")

    def __init__(self, value: str | None = None) -> None:
        self.value = value
        self.children: dict[str, TrieNode] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.value == other.value and self.children == other.children

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TrieNode(value={self.value!r}, children={self.children!r})"


class Trie:
    """Longest-prefix lookup over a fixed set of named literals.

    Usage:
            >>> trie = Trie.build([("add", "+"), ("inc", "++")])
            >>> trie.longest_match("++x")
            (2, 'inc')
            >>> trie.longest_match("+x")
            (1, 'add')
            >>> trie.longest_match("x") is None
            True

    """

    __slots__ = ("_root", "_size")

    def __init__(self, root: TrieNode | None = None, size: int = 0) -> None:
        self._root = root if root is not None else TrieNode()
        self._size = size

    @classmethod
    def build(cls, literals: Iterable[tuple[str, str]]) -> Trie:
        """Build a trie from (name, literal) pairs.

        Literals are inserted longest first. When two entries share the same
        text, the one inserted later wins. Empty literals are skipped since
        they can never produce a token.

        Args:
            literals: (name, literal) pairs

        Returns:
            A new Trie
        """
        ordered = sorted(literals, key=lambda item: len(item[1]), reverse=True)
        root = TrieNode()
        size = 0
        for name, literal in ordered:
            if not literal:
                continue
            node = root
            for char in literal:
                child = node.children.get(char)
                if child is None:
                    child = TrieNode()
                    node.children[char] = child
                node = child
            if node.value is None:
                size += 1
            node.value = name
        return cls(root, size)

    @property
    def root(self) -> TrieNode:
        """Root node (never terminal)."""
        return self._root

    def __len__(self) -> int:
        """Number of distinct literal texts stored."""
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def longest_match(self, text: str, start: int = 0) -> tuple[int, str] | None:
        """Find the longest literal that is a prefix of text[start:].

        Args:
            text: Input text
            start: Offset to probe

        Returns:
            (matched_length, name) or None if no literal matches

        Complexity: O(k) where k = length of the longest literal
        """
        node = self._root
        best: tuple[int, str] | None = None
        pos = start
        text_len = len(text)
        while pos < text_len:
            if node.value is not None:
                best = (pos - start, node.value)
            child = node.children.get(text[pos])
            if child is None:
                return best
            node = child
            pos += 1
        if node.value is not None:
            return (pos - start, node.value)
        return best
