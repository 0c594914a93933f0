"""Prefix tree nodes and the traversals shared by the dictionary."""

from __future__ import annotations

from typing import Iterator

from triedict.constants import ROOT_CHAR


class TrieNode:
    """Single node in the prefix tree.

    Each node owns its children outright; dropping the edge to a node drops
    its whole subtree.
    """

    __slots__ = ("character", "children", "is_terminal")

    def __init__(self, character: str = ROOT_CHAR):
        self.character = character
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.character!r}{mark}, children={len(self.children)})"


def walk(root: TrieNode, s: str) -> TrieNode | None:
    """Node reached by consuming *s* from *root*, or None if the path breaks."""
    node = root
    for ch in s:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


def iter_words(node: TrieNode, prefix: str = "") -> Iterator[str]:
    """Yield every word at or below *node*, spelled starting with *prefix*.

    Children are visited in sorted order and a terminal node comes before its
    descendants, so words are produced in lexicographic order.
    """
    stack: list[tuple[TrieNode, str]] = [(node, prefix)]
    while stack:
        current, acc = stack.pop()
        if current.is_terminal:
            yield acc
        for ch in sorted(current.children, reverse=True):
            stack.append((current.children[ch], acc + ch))


def count_nodes(root: TrieNode) -> int:
    """Number of nodes below *root* (the root itself is not counted)."""
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total += len(node.children)
        stack.extend(node.children.values())
    return total


def format_tree(root: TrieNode) -> str:
    """Render the hierarchy under *root* as indented text.

        root
         └─
           ├─c
           │ └─a
           └─d
    """
    lines = ["root"]
    stack: list[tuple[TrieNode, str, bool]] = [(root, " ", True)]
    while stack:
        node, indent, is_last = stack.pop()
        if is_last:
            lines.append(f"{indent}└─{node.character}")
            indent += "  "
        else:
            lines.append(f"{indent}├─{node.character}")
            indent += "│ "
        keys = sorted(node.children)
        for i in range(len(keys) - 1, -1, -1):
            stack.append((node.children[keys[i]], indent, i == len(keys) - 1))
    return "\n".join(lines)
