"""
Word Graph Path Finder.

Finds paths between equal-length words in the implicit graph where two
words are connected when they differ in exactly one character, using a
character trie as the adjacency source.
"""

__version__ = "0.1.0"
