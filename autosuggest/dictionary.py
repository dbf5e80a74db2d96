"""Dictionary / word list with trie-backed completion and suggestions."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from autosuggest.constants import COMMENT_PREFIX, LOGGER_NAME, SAMPLE_WORDS, WORD_LIST_PATHS
from autosuggest.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def _is_comment(line: str) -> bool:
    if not line.startswith(COMMENT_PREFIX):
        return False
    rest = line[len(COMMENT_PREFIX):]
    return not rest or rest[0].isspace()


class Dictionary:
    """Holds every word you want to complete or correct against.

    A new dictionary is empty unless ``words`` is given; add more with
    :meth:`insert` or :meth:`load`.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.trie = Trie()
        if words is not None:
            self.trie.insert_many(words)

    @classmethod
    def from_file(cls, path: str) -> Dictionary:
        dictionary = cls()
        dictionary.load(path)
        return dictionary

    # loading

    def load(self, path: str) -> int:
        """Insert every word of a UTF-8 word list, one word per line.

        Blank lines and comment lines (``#`` alone or followed by whitespace)
        are skipped.  Returns the number of words that were not already
        present.
        """
        before = len(self.trie)
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word and not _is_comment(word):
                    self.trie.insert(word)
        added = len(self.trie) - before
        log.info("Loaded %s words from %s", f"{added:,}", path)
        return added

    def load_default(self, path: str | None = None) -> int:
        """Load the first word list that adds words, falling back to the sample words."""
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(WORD_LIST_PATHS)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                log.debug("No word list at %s", candidate)
                continue
            added = self.load(candidate)
            if added:
                return added
            log.warning("No new words in %s -- trying the next word list.", candidate)

        log.warning("No usable word list found -- using built-in sample vocabulary.")
        before = len(self.trie)
        self.trie.insert_many(SAMPLE_WORDS)
        return len(self.trie) - before

    # forwarded operations

    def insert(self, word: str) -> None:
        """Add a word to the dictionary."""
        self.trie.insert(word)

    def find_words_based_on_prefix(self, prefix: str) -> set[str] | None:
        """Complete words starting with ``prefix``, or None if there are none."""
        return self.trie.find_words_based_on_prefix(prefix)

    def auto_suggest_alternative_words(self, typo: str) -> set[str] | None:
        """Stored words similar to a mistyped or unfinished word.

        Returns None if no stored word shares even the first character of
        ``typo``.
        """
        return self.trie.auto_suggest(typo)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
