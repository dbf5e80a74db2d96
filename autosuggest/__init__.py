"""autosuggest -- trie-backed word completion and suggestions."""

from autosuggest.trie import Trie, TrieNode
from autosuggest.dictionary import Dictionary

__all__ = [
    "Dictionary",
    "Trie",
    "TrieNode",
]
