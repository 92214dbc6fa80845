"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from wordgraph.data import VocabularyStatistics, build_vocabulary
from wordgraph.graph import AdjacentWordGraphPathFinder
from wordgraph.heuristics import CandidateWordPriorityCalculator
from wordgraph.trie import CharacterTrie


def _is_word_ladder(path: list[str]) -> bool:
    for word1, word2 in zip(path, path[1:]):
        if len(word1) != len(word2):
            return False
        if sum(1 for a, b in zip(word1, word2) if a != b) != 1:
            return False
    return True


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def is_word_ladder():
    """Return a check that each consecutive pair of words differs in exactly one position."""
    return _is_word_ladder


@pytest.fixture
def time_words() -> list[str]:
    """Words around 'time', including longer and shorter words sharing its prefix."""
    return [
        "limb",
        "line",
        "lime",
        "time",
        "timo",
        "tame",
        "tile",
        "timer",
        "timers",
        "tamer",
        "lines",
        "liner",
        "tim",
    ]


@pytest.fixture
def time_trie(time_words: list[str]) -> CharacterTrie:
    """Return a trie holding time_words."""
    return CharacterTrie(time_words)


@pytest.fixture
def substitution_words() -> list[str]:
    """Return words with known substitution statistics."""
    return ["read", "bead", "fail", "dead", "road", "reed", "calm", "real", "rear"]


@pytest.fixture
def substitution_vocabulary(substitution_words: list[str]) -> VocabularyStatistics:
    """Return the vocabulary built from substitution_words."""
    return build_vocabulary(substitution_words, lambda word: True)


@pytest.fixture
def ladder_words() -> list[str]:
    """
    Return four letter words with several shortest paths from 'cold' to 'warm'.

    'quiz' has no neighbors.
    """
    return [
        "cold",
        "cord",
        "card",
        "ward",
        "warm",
        "word",
        "worm",
        "wold",
        "bold",
        "bolt",
        "colt",
        "core",
        "wore",
        "quiz",
    ]


@pytest.fixture
def ladder_vocabulary(ladder_words: list[str]) -> VocabularyStatistics:
    """Return the vocabulary built from ladder_words."""
    return build_vocabulary(ladder_words, lambda word: len(word) == 4)


@pytest.fixture
def ladder_finder(ladder_vocabulary: VocabularyStatistics) -> AdjacentWordGraphPathFinder:
    """Return a path finder over ladder_words using its substitution statistics."""
    calculator = CandidateWordPriorityCalculator(
        20,
        1,
        1,
        1,
        1,
        from_character_frequencies=ladder_vocabulary.from_character_frequencies,
        character_substitution_frequencies=ladder_vocabulary.character_substitution_frequencies,
    )
    return AdjacentWordGraphPathFinder(ladder_vocabulary.trie, calculator)
