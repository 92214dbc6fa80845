"""
Adjacent word lookup over a character trie.

Two words are adjacent when they have the same length and differ in exactly
one character position (e.g. 'time' and 'tame'). Rather than storing the
graph of adjacent words, neighbors are found on demand by walking the trie
once per character position, letting that position (the wildcard) match any
child.
"""

from __future__ import annotations

from typing import Iterator

from wordgraph.trie.builder import CharacterTrie
from wordgraph.trie.node import TrieNode


class AdjacentWords:
    """
    Lazy, restartable sequence of the words adjacent to a word.

    Each call to iter() walks the trie again, so the sequence can be
    consumed more than once. Words are produced by wildcard position, then
    in trie iteration order.
    """

    __slots__ = ("_trie", "_word")

    def __init__(self, trie: CharacterTrie, word: str) -> None:
        if len(word) == 0:
            raise ValueError("Parameter 'word' cannot be an empty string.")
        self._trie = trie
        self._word = word

    def __iter__(self) -> Iterator[str]:
        word = self._word
        path: list[str] = []
        for wildcard_index in range(len(word)):
            if wildcard_index == 0:
                starts = list(self._trie.roots.values())
            elif word[0] in self._trie.roots:
                starts = [self._trie.roots[word[0]]]
            else:
                starts = []

            for node in starts:
                path.append(node.item)
                yield from self._walk(node, 1, wildcard_index, path)
                path.pop()

    def _walk(
        self,
        node: TrieNode,
        next_index: int,
        wildcard_index: int,
        path: list[str],
    ) -> Iterator[str]:
        """Follow the word below node, branching at the wildcard position."""
        word = self._word

        if next_index == len(word):
            if node.is_terminal:
                candidate = "".join(path)
                # The wildcard may have matched the original character
                if candidate != word:
                    yield candidate
            return

        if next_index == wildcard_index:
            for child in node.children.values():
                path.append(child.item)
                yield from self._walk(child, next_index + 1, wildcard_index, path)
                path.pop()
        elif node.child_exists(word[next_index]):
            path.append(word[next_index])
            yield from self._walk(
                node.get_child(word[next_index]), next_index + 1, wildcard_index, path
            )
            path.pop()

    def __repr__(self) -> str:
        return f"AdjacentWords(word={self._word!r})"


def find_adjacent_words(trie: CharacterTrie, word: str) -> AdjacentWords:
    """
    Find all words in the trie which are adjacent to word.

    Args:
        trie: Trie containing the vocabulary
        word: The word to find the neighbors of

    Returns:
        Lazy iterable of adjacent words (never includes word itself)

    Raises:
        ValueError: If word is empty
    """
    return AdjacentWords(trie, word)
