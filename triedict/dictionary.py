"""String dictionary backed by a prefix tree."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from triedict.constants import MAX_EDIT_DISTANCE
from triedict.distance import levenshtein
from triedict.trie import TrieNode, count_nodes, format_tree, iter_words, walk

log = logging.getLogger("triedict")


def _check_str(value: object, name: str = "word") -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")


class TrieDictionary:
    """In-memory word set with prefix autocomplete and spelling suggestions.

    The empty string is never stored. Not safe for concurrent mutation;
    callers sharing an instance across threads must serialize access.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            self.update(words)

    # Loading

    @classmethod
    def from_file(cls, path: str) -> TrieDictionary:
        d = cls()
        d.load(path)
        return d

    def load(self, path: str) -> int:
        """Insert every non-blank line of *path*. Returns how many were new."""
        with open(path, "r", encoding="utf-8") as f:
            added = self.update(line.strip() for line in f)
        log.info("Loaded %s words from %s", f"{added:,}", path)
        return added

    def update(self, words: Iterable[str]) -> int:
        added = 0
        for word in words:
            if word and self.insert(word):
                added += 1
        return added

    # Core operations

    def insert(self, word: str) -> bool:
        """Add *word*. Returns False if it was already present or empty."""
        _check_str(word)
        if not word:
            log.debug("Rejected empty word")
            return False
        node = self.root
        for ch in word:
            if not node.has_child(ch):
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        if node.is_terminal:
            log.debug("Duplicate insert of %r", word)
            return False
        node.is_terminal = True
        self._size += 1
        return True

    def search(self, word: str) -> bool:
        _check_str(word)
        if not word:
            return False
        node = walk(self.root, word)
        return node is not None and node.is_terminal

    def delete(self, word: str) -> bool:
        """Unmark *word* without reclaiming its nodes.

        Prefix queries stay correct because only terminal flags are read;
        use :meth:`delete_word` to also drop branches nothing else needs.
        """
        _check_str(word)
        if not word:
            return False
        node = walk(self.root, word)
        if node is None or not node.is_terminal:
            return False
        node.is_terminal = False
        self._size -= 1
        return True

    def delete_word(self, word: str) -> bool:
        """Remove *word* and prune every node left without a purpose."""
        _check_str(word)
        if not word:
            return False
        path: list[tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.is_terminal:
            return False
        node.is_terminal = False
        self._size -= 1

        # Unwind toward the root, cutting edges to nodes that are neither
        # terminal nor anyone's prefix. The root is never cut.
        pruned = 0
        while path and not node.is_terminal and not node.children:
            parent, ch = path.pop()
            del parent.children[ch]
            node = parent
            pruned += 1
        if pruned:
            log.debug("Pruned %d node(s) of %r", pruned, word)
        return True

    # Queries

    def auto_suggest(self, prefix: str) -> list[str]:
        """All stored words starting with *prefix*, in sorted order."""
        _check_str(prefix, "prefix")
        node = walk(self.root, prefix)
        if node is None:
            return []
        return list(iter_words(node, prefix))

    def get_all_words(self) -> list[str]:
        return self.auto_suggest("")

    def get_spelling_suggestions(
        self, word: str, max_distance: int = MAX_EDIT_DISTANCE
    ) -> list[str]:
        """Stored words sharing *word*'s first letter within *max_distance* edits.

        Raises ValueError for an empty *word*.
        """
        _check_str(word)
        if not word:
            raise ValueError("cannot suggest spellings for an empty word")
        first = word[0]
        start = self.root.children.get(first)
        if start is None:
            return []

        suggestions: list[str] = []
        for candidate in iter_words(start, first):
            # A length gap alone already costs that many edits.
            if abs(len(candidate) - len(word)) > max_distance:
                continue
            if levenshtein(word, candidate) <= max_distance:
                suggestions.append(candidate)
        return suggestions

    # Diagnostics

    def node_count(self) -> int:
        return count_nodes(self.root)

    def format_tree(self) -> str:
        return format_tree(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all_words())

    def __repr__(self) -> str:
        return f"TrieDictionary({self._size} words, {self.node_count()} nodes)"
