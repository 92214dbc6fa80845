"""
Vocabulary loading and character substitution statistics.

Usage:
    from wordgraph.data.loader import load_vocabulary

    vocabulary = load_vocabulary("data/words.txt", word_length=4)
    vocabulary.trie                                  # CharacterTrie of 4-letter words
    vocabulary.from_character_frequencies["d"]      # times 'd' was substituted away
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator

from wordgraph.config import LOWERCASE_WORDS, WORDS_ENCODING
from wordgraph.data.words import CharacterSubstitution, find_differing_characters
from wordgraph.trie import CharacterTrie, find_adjacent_words

logger = logging.getLogger(__name__)

WordFilter = Callable[[str], bool]


@dataclass
class VocabularyStatistics:
    """
    Words accepted from a word list, with the statistics used by the A* priority.

    Attributes:
        trie: Trie holding every accepted word
        words: Set of accepted words
        from_character_frequencies: How often each character is the 'from'
            side of a substitution between adjacent words
        character_substitution_frequencies: How often each (from, to)
            substitution occurs between adjacent words
    """

    trie: CharacterTrie
    words: set[str] = field(default_factory=set)
    from_character_frequencies: Counter[str] = field(default_factory=Counter)
    character_substitution_frequencies: Counter[CharacterSubstitution] = field(
        default_factory=Counter
    )

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def edge_count(self) -> int:
        """Number of adjacent word pairs (each counted once)."""
        return sum(self.from_character_frequencies.values()) // 2


def read_word_file(path: str | Path, encoding: str = WORDS_ENCODING) -> Iterator[str]:
    """Yield the stripped lines of a word list file."""
    logger.info(f"Reading words from {path}...")
    with open(path, encoding=encoding) as f:
        for line in f:
            yield line.strip()


def length_filter(length: int) -> WordFilter:
    """Build a filter accepting alphabetic words of the given length."""
    if length < 1:
        raise ValueError(f"Parameter 'length' must be greater than or equal to 1, got {length}.")

    def should_include(word: str) -> bool:
        return len(word) == length and word.isalpha()

    return should_include


def load_words(
    lines: Iterable[str],
    trie: CharacterTrie,
    should_include: WordFilter,
    lowercase: bool = LOWERCASE_WORDS,
) -> set[str]:
    """
    Add the accepted words from lines to a trie.

    Blank lines are skipped. Each distinct accepted word is added once.

    Args:
        lines: Candidate words, e.g. lines of a word list file
        trie: Trie to add the words to
        should_include: Filter deciding which words are accepted
        lowercase: Lowercase each word before filtering

    Returns:
        The set of accepted words
    """
    accepted: set[str] = set()
    for line in lines:
        word = line.strip()
        if lowercase:
            word = word.lower()
        if not word or not should_include(word):
            continue
        if word not in accepted:
            accepted.add(word)
            trie.add_word(word, fail_if_exists=True)
    return accepted


def count_substitutions(
    trie: CharacterTrie,
    words: Iterable[str],
) -> tuple[Counter[str], Counter[CharacterSubstitution]]:
    """
    Count the character substitutions between every word and its neighbors.

    Each adjacent pair is seen from both ends, so (a -> b) and (b -> a) are
    both counted.

    Returns:
        Tuple of (from-character frequencies, substitution frequencies)
    """
    from_character_frequencies: Counter[str] = Counter()
    substitution_frequencies: Counter[CharacterSubstitution] = Counter()

    for word in words:
        for adjacent_word in find_adjacent_words(trie, word):
            substitution = find_differing_characters(word, adjacent_word)
            from_character_frequencies[substitution.from_character] += 1
            substitution_frequencies[substitution] += 1

    return from_character_frequencies, substitution_frequencies


def build_vocabulary(
    lines: Iterable[str],
    should_include: WordFilter,
    lowercase: bool = LOWERCASE_WORDS,
) -> VocabularyStatistics:
    """
    Build a trie and substitution statistics from a sequence of words.

    Args:
        lines: Candidate words
        should_include: Filter deciding which words are accepted
        lowercase: Lowercase each word before filtering

    Returns:
        VocabularyStatistics for the accepted words
    """
    trie = CharacterTrie()
    words = load_words(lines, trie, should_include, lowercase=lowercase)
    logger.info(f"Loaded {len(words):,} words")

    from_frequencies, substitution_frequencies = count_substitutions(trie, words)
    vocabulary = VocabularyStatistics(
        trie=trie,
        words=words,
        from_character_frequencies=from_frequencies,
        character_substitution_frequencies=substitution_frequencies,
    )
    logger.info(
        f"Found {vocabulary.edge_count:,} adjacent word pairs, "
        f"{len(substitution_frequencies):,} distinct substitutions"
    )
    return vocabulary


def load_vocabulary(path: str | Path, word_length: int) -> VocabularyStatistics:
    """Build the vocabulary of all words of one length in a word list file."""
    return build_vocabulary(read_word_file(path), length_filter(word_length))
