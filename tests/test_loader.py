"""
Unit tests for vocabulary loading and substitution statistics.
"""

import pytest

from wordgraph.data import (
    CharacterSubstitution,
    build_vocabulary,
    length_filter,
    load_vocabulary,
    load_words,
    read_word_file,
)
from wordgraph.trie import CharacterTrie


class TestLoadWords:
    """Test adding filtered words to a trie."""

    def test_filter_applied(self):
        """Only words accepted by the filter are added."""
        trie = CharacterTrie()
        words = load_words(["time", "cat", "tile", "birds", "take"], trie, length_filter(4))
        assert words == {"time", "tile", "take"}
        assert len(trie) == 3
        assert "cat" not in trie

    def test_duplicates_added_once(self):
        """Repeated words don't raise and are added once."""
        trie = CharacterTrie()
        words = load_words(["time", "time", "tile"], trie, lambda word: True)
        assert words == {"time", "tile"}
        assert len(trie) == 2

    def test_lines_stripped_and_blank_skipped(self):
        """Whitespace is stripped and blank lines are ignored."""
        trie = CharacterTrie()
        words = load_words(["time\n", "  \n", "", " tile "], trie, lambda word: True)
        assert words == {"time", "tile"}

    def test_lowercase(self):
        """Words are lowercased when requested."""
        trie = CharacterTrie()
        words = load_words(["Time", "TIME", "tile"], trie, lambda word: True, lowercase=True)
        assert words == {"time", "tile"}

    def test_case_kept(self):
        """Case is kept when lowercasing is off."""
        trie = CharacterTrie()
        words = load_words(["Time", "time"], trie, lambda word: True, lowercase=False)
        assert words == {"Time", "time"}

    def test_existing_word_in_trie_raises(self):
        """Words already in the trie are rejected as duplicates."""
        trie = CharacterTrie(["time"])
        with pytest.raises(ValueError, match="already exists"):
            load_words(["time"], trie, lambda word: True)


class TestLengthFilter:
    """Test the word length filter."""

    def test_accepts_alphabetic_words_of_length(self):
        """Alphabetic words of the given length pass."""
        should_include = length_filter(4)
        assert should_include("time")
        assert not should_include("tim")
        assert not should_include("timer")
        assert not should_include("ti'e")

    def test_invalid_length_raises(self):
        """Lengths below 1 should raise."""
        with pytest.raises(ValueError):
            length_filter(0)


class TestBuildVocabulary:
    """Test the substitution statistics of a vocabulary."""

    def test_character_substitution_frequencies(self, substitution_vocabulary):
        """Each ordered substitution is counted once per adjacent pair direction."""
        frequencies = substitution_vocabulary.character_substitution_frequencies
        expected = {
            ("a", "e"): 1,
            ("b", "d"): 1,
            ("b", "r"): 1,
            ("d", "b"): 1,
            ("d", "l"): 1,
            ("d", "r"): 2,
            ("e", "a"): 1,
            ("e", "o"): 1,
            ("l", "d"): 1,
            ("l", "r"): 1,
            ("o", "e"): 1,
            ("r", "b"): 1,
            ("r", "d"): 2,
            ("r", "l"): 1,
        }
        assert len(frequencies) == 14
        for (from_character, to_character), count in expected.items():
            assert frequencies[CharacterSubstitution(from_character, to_character)] == count

    def test_from_character_frequencies(self, substitution_vocabulary):
        """Each 'from' character is counted per substitution."""
        assert dict(substitution_vocabulary.from_character_frequencies) == {
            "a": 1,
            "b": 2,
            "d": 4,
            "e": 2,
            "l": 2,
            "o": 1,
            "r": 4,
        }

    def test_counts(self, substitution_vocabulary):
        """Word and edge counts."""
        assert substitution_vocabulary.word_count == 9
        assert substitution_vocabulary.edge_count == 8
        assert len(substitution_vocabulary.trie) == 9

    def test_no_adjacent_words(self):
        """A vocabulary without neighbors has empty statistics."""
        vocabulary = build_vocabulary(["cat", "dog"], lambda word: True)
        assert vocabulary.word_count == 2
        assert not vocabulary.from_character_frequencies
        assert not vocabulary.character_substitution_frequencies


class TestWordFiles:
    """Test reading word list files."""

    def test_read_word_file(self, tmp_path):
        """Lines are yielded stripped."""
        path = tmp_path / "words.txt"
        path.write_text("time\ntile\n\nlime\n", encoding="utf-8")
        assert list(read_word_file(path)) == ["time", "tile", "", "lime"]

    def test_load_vocabulary(self, tmp_path):
        """Only words of the requested length are loaded."""
        path = tmp_path / "words.txt"
        path.write_text("time\ntile\ncat\nlime\ntimer\nTame\n", encoding="utf-8")
        vocabulary = load_vocabulary(path, word_length=4)
        assert vocabulary.words == {"time", "tile", "lime", "tame"}
        assert vocabulary.edge_count == 3

    def test_missing_file_raises(self, tmp_path):
        """A missing word list should raise."""
        with pytest.raises(FileNotFoundError):
            load_vocabulary(tmp_path / "missing.txt", word_length=4)
