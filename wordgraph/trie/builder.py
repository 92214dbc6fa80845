"""
Character trie holding a vocabulary of words.

Usage:
    trie = CharacterTrie()
    trie.add_word("time")
    trie.add_word("tim")      # promotes the existing 'm' node
    "time" in trie            # True
"""

from __future__ import annotations

from typing import Iterable, Mapping

from wordgraph.trie.node import NodeKind, TrieNode


class CharacterTrie:
    """
    Trie of characters where each root-to-terminal path spells one word.

    The root is an internal node holding no character; its children are
    the first characters of every word.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        """
        Initialize the trie.

        Args:
            words: Optional words to add (duplicates are ignored)
        """
        self._root = TrieNode("")
        self._word_count = 0
        for word in words:
            self.add_word(word, fail_if_exists=False)

    @property
    def roots(self) -> Mapping[str, TrieNode]:
        """Nodes for the first character of each word."""
        return self._root.children

    def add_word(self, word: str, fail_if_exists: bool = True) -> None:
        """
        Add a word to the trie.

        Intermediate characters get internal nodes and the last character a
        terminal node. If the last node already exists as an internal node
        (the word is a prefix of another word) it is promoted in place.

        Args:
            word: The word to add
            fail_if_exists: Raise if the word is already in the trie,
                otherwise adding it again does nothing

        Raises:
            ValueError: If word is empty, or already exists and fail_if_exists is set
        """
        if len(word) == 0:
            raise ValueError("Parameter 'word' cannot be an empty string.")

        current = self._root
        last_index = len(word) - 1
        for index, char in enumerate(word):
            is_last = index == last_index
            if current.child_exists(char):
                current = current.get_child(char)
                if is_last:
                    if current.is_terminal:
                        if fail_if_exists:
                            raise ValueError(f"The word '{word}' already exists in the trie.")
                        return
                    current.promote()
            else:
                kind = NodeKind.TERMINAL if is_last else NodeKind.INTERNAL
                child = TrieNode(char, kind)
                current.add_child(child)
                current = child

        self._word_count += 1

    def find_node(self, word: str) -> TrieNode | None:
        """Return the node reached by following word, or None."""
        current = self._root
        for char in word:
            if not current.child_exists(char):
                return None
            current = current.get_child(char)
        return current

    def contains(self, word: str) -> bool:
        """True if word was added to the trie."""
        if not word:
            return False
        node = self.find_node(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._word_count

    def __repr__(self) -> str:
        return f"CharacterTrie(words={self._word_count})"
