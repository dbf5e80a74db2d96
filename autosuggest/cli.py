"""CLI / terminal mode for autosuggest."""

from __future__ import annotations

import argparse
import logging
import time

from autosuggest.constants import LOGGER_NAME
from autosuggest.dictionary import Dictionary

log = logging.getLogger(LOGGER_NAME)

_HELP = """Commands:
  add WORD        -- add a word to the dictionary
  prefix PREFIX   -- list words starting with PREFIX
  suggest WORD    -- suggest stored words for a mistyped WORD
  count           -- number of stored words
  help            -- show this help
  quit            -- leave"""


def print_prefix(dictionary: Dictionary, prefix: str) -> None:
    words = dictionary.find_words_based_on_prefix(prefix)
    if words is None:
        print(f"  No words start with '{prefix}'.")
        return
    print(f"  {len(words)} word(s) start with '{prefix}':")
    for word in sorted(words):
        print(f"    {word}")


def print_suggestions(dictionary: Dictionary, query: str) -> None:
    words = dictionary.auto_suggest_alternative_words(query)
    if words is None:
        print(f"  No suggestions for '{query}'.")
        return
    print(f"  Did you mean ({len(words)}):")
    for word in sorted(words):
        print(f"    {word}")


def run_interactive(dictionary: Dictionary) -> None:
    """Read commands from the terminal until ``quit`` or EOF."""
    print()
    print("=" * 60)
    print("  AUTOSUGGEST -- Interactive Mode")
    print("=" * 60)
    print()
    print(_HELP)
    print()

    while True:
        try:
            inp = input("  > ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd, _, arg = inp.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("quit", "exit"):
            break
        if cmd == "help":
            print(_HELP)
        elif cmd == "count":
            print(f"  {len(dictionary):,} words stored.")
        elif cmd in ("add", "prefix", "suggest") and not arg:
            print(f"  Usage: {cmd} WORD")
        elif cmd == "add":
            dictionary.insert(arg)
            print(f"  Added '{arg}'.")
        elif cmd == "prefix":
            print_prefix(dictionary, arg)
        elif cmd == "suggest":
            print_suggestions(dictionary, arg)
        else:
            print(f"  Unknown command '{cmd}'.  Type 'help' for the list.")


def run_cli(
    dictionary: Dictionary,
    prefixes: list[str],
    queries: list[str],
) -> None:
    """Answer the queries given on the command line."""
    t0 = time.time()
    for prefix in prefixes:
        print(f"\nprefix '{prefix}'")
        print_prefix(dictionary, prefix)
    for query in queries:
        print(f"\nsuggest '{query}'")
        print_suggestions(dictionary, query)
    log.debug("Answered %d queries in %.3fs", len(prefixes) + len(queries), time.time() - t0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="autosuggest -- word completion and suggestions from a trie",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--prefix", action="append", default=[], metavar="PREFIX",
                        help="List words starting with PREFIX (repeatable)")
    parser.add_argument("--suggest", action="append", default=[], metavar="WORD",
                        help="Suggest words for a mistyped WORD (repeatable)")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start the interactive prompt after answering queries")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary()
    dictionary.load_default(args.dict)

    if args.prefix or args.suggest:
        run_cli(dictionary, args.prefix, args.suggest)
    if args.interactive or not (args.prefix or args.suggest):
        run_interactive(dictionary)
