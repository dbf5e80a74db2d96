"""Prefix trie for word completion and typo-tolerant suggestions."""

from __future__ import annotations

from collections.abc import Iterable


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie answering "words starting with" and "did you mean" queries.

    Words are stored as paths of single-character edges from the root; the
    node at the end of each stored word is flagged terminal.  Queries never
    modify the tree, so readers only need shared access.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    # mutation

    def insert(self, word: str) -> None:
        """Add ``word``.  Inserting a word twice has no further effect."""
        _require_str(word, "word")
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def insert_many(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    # queries

    def find_words_based_on_prefix(self, prefix: str) -> set[str] | None:
        """All stored words starting with ``prefix``.

        Returns None when no stored word has ``prefix`` as a literal prefix.
        A returned set is never empty.
        """
        _require_str(prefix, "prefix")
        node = self._walk(prefix)
        if node is None:
            return None
        return self._combine(prefix, node) or None

    def auto_suggest(self, query: str) -> set[str] | None:
        """Completions of the longest leading part of ``query`` found in the trie.

        ``"Dogecoins"`` against a trie holding ``"Dogecoin"`` walks eight
        characters, stops at the stray ``s`` and offers ``{"Dogecoin"}``.
        A query that walks completely gets every completion of itself,
        including the query when it is a stored word.

        Returns None for an empty query or when not even the first
        character is shared with a stored word.
        """
        _require_str(query, "query")
        if not query:
            return None
        node = self.root
        matched = 0
        for ch in query:
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            matched += 1
        if matched == 0:
            return None
        return self._combine(query[:matched], node)

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return self._size

    # traversal helpers

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _combine(self, head: str, node: TrieNode) -> set[str]:
        return {head + suffix for suffix in self._collect_suffixes(node)}

    @staticmethod
    def _collect_suffixes(node: TrieNode) -> set[str]:
        """Suffixes, relative to ``node``, of every stored word passing through it."""
        suffixes: set[str] = set()
        # explicit stack: word length is not bounded by the recursion limit
        stack: list[tuple[TrieNode, str]] = [(node, "")]
        while stack:
            current, path = stack.pop()
            if current.is_terminal:
                suffixes.add(path)
            for ch, child in current.children.items():
                stack.append((child, path + ch))
        return suffixes
