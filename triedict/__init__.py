"""Trie Dictionary -- prefix-tree word store."""

from triedict.constants import MAX_EDIT_DISTANCE
from triedict.trie import TrieNode, count_nodes, format_tree, iter_words, walk
from triedict.distance import levenshtein
from triedict.dictionary import TrieDictionary

__all__ = [
    "MAX_EDIT_DISTANCE",
    "TrieDictionary",
    "TrieNode",
    "count_nodes",
    "format_tree",
    "iter_words",
    "levenshtein",
    "walk",
]
