"""
Trie module.

Provides the vocabulary trie and adjacency lookup:
- TrieNode / NodeKind: Internal or terminal character node
- CharacterTrie: Word storage with in-place promotion of prefix nodes
- find_adjacent_words: Lazy neighbors of a word (one character substituted)
"""

from wordgraph.trie.adjacency import AdjacentWords, find_adjacent_words
from wordgraph.trie.builder import CharacterTrie
from wordgraph.trie.node import NodeKind, TrieNode

__all__ = [
    "AdjacentWords",
    "CharacterTrie",
    "NodeKind",
    "TrieNode",
    "find_adjacent_words",
]
