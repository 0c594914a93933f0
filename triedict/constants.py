"""Tunables for the trie dictionary."""

import os

# Character carried by the root node; it never spells anything.
ROOT_CHAR = ""

# Candidates farther than this from the queried word are not suggested.
MAX_EDIT_DISTANCE = 2

# Word lists tried in order when no path is given on the command line.
WORD_LIST_PATHS = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]
