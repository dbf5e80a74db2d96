#!/usr/bin/env python3
"""
Setup script for autosuggest.
Builds a word list (dictionary.txt) for the demo.
"""

import os
import sys
import urllib.request

DICT_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt')

SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def is_comment(line):
    """'#' alone or '#' followed by whitespace; '#hashtag' is a word."""
    return line.startswith('#') and (len(line) == 1 or line[1].isspace())


def read_words(path):
    """Unique non-empty words from a word list, case preserved."""
    words = set()
    with open(path, encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if word and not is_comment(word):
                words.add(word)
    return words


def write_words(words, path):
    with open(path, 'w', encoding='utf-8') as f:
        for word in sorted(words):
            f.write(word + '\n')


def download_dictionary(dict_path=DICT_PATH):
    """Create a word list for the demo.  Returns True on success."""
    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    print("Building word dictionary...")

    if os.path.exists(SYSTEM_DICT):
        print(f"  Using system dictionary: {SYSTEM_DICT}")
        words = read_words(SYSTEM_DICT)
        write_words(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return True

    # Download next to the target; only a cleaned, complete list is moved into place.
    part_path = dict_path + '.part'
    for url in URLS:
        try:
            print(f"  Trying {url}...")
            urllib.request.urlretrieve(url, part_path)
            words = read_words(part_path)
            if not words:
                raise ValueError("downloaded word list is empty")
            write_words(words, part_path)
            os.replace(part_path, dict_path)
            print(f"✓ Dictionary downloaded: {len(words):,} words")
            return True
        except (OSError, ValueError) as e:
            print(f"  Failed: {e}")
            continue
        finally:
            if os.path.exists(part_path):
                os.remove(part_path)

    print("\n⚠ Could not build a dictionary automatically.")
    print("  Save any word list (one word per line) as:")
    print(f"  {dict_path}")
    print("  The demo falls back to a small built-in vocabulary until then.")
    return False


def main():
    print("=" * 50)
    print("  autosuggest — Setup")
    print("=" * 50)
    print()

    ok = download_dictionary()

    print()
    print("=" * 50)
    print("  Setup complete! Run the demo:")
    print()
    print("    python autosuggest_demo.py                    # interactive")
    print("    python autosuggest_demo.py --suggest Dogecoins")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
