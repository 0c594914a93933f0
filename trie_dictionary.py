#!/usr/bin/env python3
"""
Trie Dictionary

Loads a word list into a prefix tree and answers lookups, prefix
autocomplete and spelling-suggestion queries from the terminal.

Usage: python trie_dictionary.py [--dict words.txt] [--suggest PREFIX]
"""

from triedict.cli import main


if __name__ == "__main__":
    main()
