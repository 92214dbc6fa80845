"""
Trie node holding one character, tagged as either an internal node or a
terminal node (the last character of a complete word).
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class NodeKind(Enum):
    """Variant tag of a trie node."""

    INTERNAL = "internal"
    TERMINAL = "terminal"


class TrieNode:
    """
    A node of a character trie.

    Attributes:
        item: The character held by the node
        kind: Whether the node ends a word (TERMINAL) or not (INTERNAL)
    """

    __slots__ = ("item", "kind", "_children")

    def __init__(self, item: str, kind: NodeKind = NodeKind.INTERNAL) -> None:
        self.item = item
        self.kind = kind
        self._children: dict[str, TrieNode] = {}

    @property
    def children(self) -> Mapping[str, TrieNode]:
        """Read-only view of the child nodes, keyed by character."""
        return MappingProxyType(self._children)

    @property
    def is_terminal(self) -> bool:
        return self.kind is NodeKind.TERMINAL

    def child_exists(self, item: str) -> bool:
        return item in self._children

    def get_child(self, item: str) -> TrieNode:
        """
        Return the child node for a character.

        Raises:
            ValueError: If the node has no child for the character
        """
        self._check_child_exists(item)
        return self._children[item]

    def add_child(self, node: TrieNode) -> None:
        """
        Add a child node.

        Raises:
            ValueError: If a child for the node's character already exists
        """
        if node.item in self._children:
            raise ValueError(f"A child node for item '{node.item}' already exists.")
        self._children[node.item] = node

    def remove_child(self, item: str) -> None:
        """
        Remove the child node for a character.

        Raises:
            ValueError: If the node has no child for the character
        """
        self._check_child_exists(item)
        del self._children[item]

    def promote(self) -> None:
        """Mark the node as the end of a word, keeping its children."""
        self.kind = NodeKind.TERMINAL

    def _check_child_exists(self, item: str) -> None:
        if item not in self._children:
            raise ValueError(f"The node does not contain a child for item '{item}'.")

    def __repr__(self) -> str:
        return f"TrieNode(item={self.item!r}, kind={self.kind.value}, children={len(self._children)})"
