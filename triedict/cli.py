"""CLI / terminal mode for the trie dictionary."""

from __future__ import annotations

import argparse
import logging
import os

from triedict.constants import WORD_LIST_PATHS
from triedict.dictionary import TrieDictionary

log = logging.getLogger("triedict")

HELP = """\
Commands:
  add WORD              -- insert a word
  find WORD             -- check whether a word is stored
  del WORD              -- unmark a word (nodes are kept)
  prune WORD            -- delete a word and reclaim unused nodes
  suggest PREFIX        -- list words starting with PREFIX
  spell WORD            -- list words within two edits of WORD
  words                 -- list every word
  tree                  -- print the node hierarchy
  count                 -- number of words and nodes
  done                  -- leave"""


def load_dictionary(dict_path: str | None) -> TrieDictionary:
    """Dictionary from *dict_path*, else the first default word list found."""
    if dict_path:
        return _load_or_empty(dict_path)

    for path in WORD_LIST_PATHS:
        if os.path.exists(path):
            return _load_or_empty(path)

    log.warning("No word list found -- starting with an empty dictionary.")
    return TrieDictionary()


def _load_or_empty(path: str) -> TrieDictionary:
    dictionary = TrieDictionary()
    try:
        dictionary.load(path)
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Cannot read word list %s (%s) -- starting empty.", path, exc)
        return TrieDictionary()
    return dictionary


def _print_words(words: list[str]) -> None:
    if not words:
        print("  (none)")
        return
    for w in words:
        print(f"  {w}")
    print(f"  -- {len(words)} word(s)")


def handle_command(dictionary: TrieDictionary, inp: str) -> bool:
    """Run one command line. Returns False when the loop should stop."""
    parts = inp.split()
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("done", "quit", "exit"):
        return False
    if cmd == "help":
        print(HELP)
    elif cmd == "words":
        _print_words(dictionary.get_all_words())
    elif cmd == "tree":
        print(dictionary.format_tree())
    elif cmd == "count":
        print(f"  {len(dictionary)} word(s), {dictionary.node_count()} node(s)")
    elif len(args) != 1:
        print("  Format: COMMAND ARGUMENT  (type 'help' for the list)")
    elif cmd == "add":
        added = dictionary.insert(args[0])
        print(f"  Added '{args[0]}'" if added else f"  '{args[0]}' already present")
    elif cmd == "find":
        found = dictionary.search(args[0])
        print(f"  '{args[0]}' {'found' if found else 'not found'}")
    elif cmd == "del":
        ok = dictionary.delete(args[0])
        print(f"  Deleted '{args[0]}'" if ok else f"  '{args[0]}' not present")
    elif cmd == "prune":
        ok = dictionary.delete_word(args[0])
        print(f"  Deleted '{args[0]}'" if ok else f"  '{args[0]}' not present")
    elif cmd == "suggest":
        _print_words(dictionary.auto_suggest(args[0]))
    elif cmd == "spell":
        _print_words(dictionary.get_spelling_suggestions(args[0]))
    else:
        print(f"  Unknown command '{cmd}'  (type 'help' for the list)")
    return True


def run_cli(dictionary: TrieDictionary) -> None:
    """Interactive command loop on the terminal."""
    print("\n" + "=" * 60)
    print("  TRIE DICTIONARY -- Interactive Mode")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not handle_command(dictionary, inp):
            break


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Trie Dictionary -- lookup, autocomplete and spelling suggestions",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--suggest", type=str, default=None, metavar="PREFIX",
                        help="Print words starting with PREFIX and exit")
    parser.add_argument("--spell", type=str, default=None, metavar="WORD",
                        help="Print spelling suggestions for WORD and exit")
    parser.add_argument("--tree", action="store_true",
                        help="Print the node hierarchy and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = load_dictionary(args.dict)

    if args.suggest is not None:
        _print_words(dictionary.auto_suggest(args.suggest))
    elif args.spell is not None:
        if not args.spell:
            parser.error("--spell needs a non-empty word")
        _print_words(dictionary.get_spelling_suggestions(args.spell))
    elif args.tree:
        print(dictionary.format_tree())
    else:
        run_cli(dictionary)
