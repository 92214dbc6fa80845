"""
Data loading module.

Provides vocabulary ingestion and word comparison helpers.

Usage:
    from wordgraph.data import load_vocabulary

    vocabulary = load_vocabulary("data/words.txt", word_length=4)
"""

from wordgraph.data.loader import (
    VocabularyStatistics,
    build_vocabulary,
    count_substitutions,
    length_filter,
    load_vocabulary,
    load_words,
    read_word_file,
)
from wordgraph.data.words import CharacterSubstitution, find_differing_characters

__all__ = [
    "CharacterSubstitution",
    "VocabularyStatistics",
    "build_vocabulary",
    "count_substitutions",
    "find_differing_characters",
    "length_filter",
    "load_vocabulary",
    "load_words",
    "read_word_file",
]
