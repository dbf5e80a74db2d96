#!/usr/bin/env python3
"""
autosuggest demo

Loads a word list (or the built-in sample words) into a trie-backed
dictionary and answers prefix completions and typo suggestions from the
command line or an interactive prompt.

    python autosuggest_demo.py --prefix Do --suggest Dogecoins
    python autosuggest_demo.py --dict words.txt -i
"""

from autosuggest.cli import main

if __name__ == "__main__":
    main()
