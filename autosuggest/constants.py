"""Configuration constants for autosuggest."""

from __future__ import annotations

import os

LOGGER_NAME = "autosuggest"

# Word lists tried in order by Dictionary.load_default() when no path is given.
WORD_LIST_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

# A word-list line is a comment when it is "#" alone or "#" followed by
# whitespace; "#hashtag" is an ordinary word.
COMMENT_PREFIX = "#"

# Built-in vocabulary used when no word list can be found.
SAMPLE_WORDS: tuple[str, ...] = (
    "Dog", "Dogecoin", "Dodge", "Door", "Dorm", "Dot",
    "Cab", "Cabin", "Cable", "Cake", "Call", "Camel",
    "Bit", "Bitcoin", "Bite", "Block", "Blockchain", "Blog",
    "Ether", "Ethereum", "Exchange", "Wallet", "Walnut", "Wall",
    "apple", "apply", "application", "ape", "apt",
)
