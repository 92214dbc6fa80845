"""
Unit tests for the word comparison helpers.
"""

import pytest

from wordgraph.data import CharacterSubstitution, find_differing_characters


class TestFindDifferingCharacters:
    """Test finding the substituted character between adjacent words."""

    @pytest.mark.parametrize(
        ("word1", "word2", "expected"),
        [
            ("time", "tame", ("i", "a")),
            ("tame", "time", ("a", "i")),
            ("cold", "bold", ("c", "b")),
            ("cold", "colt", ("d", "t")),
            ("a", "b", ("a", "b")),
        ],
    )
    def test_single_difference(self, word1, word2, expected):
        """The differing characters are returned in word order."""
        assert find_differing_characters(word1, word2) == CharacterSubstitution(*expected)

    def test_word1_empty_raises(self):
        """An empty first word should raise."""
        with pytest.raises(ValueError, match="'word1' must be greater than or equal to 1"):
            find_differing_characters("", "time")

    def test_word2_empty_raises(self):
        """An empty second word should raise."""
        with pytest.raises(ValueError, match="'word2' must be greater than or equal to 1"):
            find_differing_characters("time", "")

    def test_different_lengths_raises(self):
        """Words of different lengths should raise."""
        with pytest.raises(ValueError, match="must have the same length"):
            find_differing_characters("time", "timer")

    def test_more_than_one_difference_raises(self):
        """Words differing in two places should raise."""
        with pytest.raises(ValueError, match="differ by more than 1 character"):
            find_differing_characters("time", "tale")

    def test_same_words_raises(self):
        """Identical words should raise."""
        with pytest.raises(ValueError, match="are the same"):
            find_differing_characters("time", "time")


class TestCharacterSubstitution:
    """Test substitution keys."""

    def test_ordered(self):
        """(a -> b) and (b -> a) are different keys."""
        assert CharacterSubstitution("a", "b") != CharacterSubstitution("b", "a")
        assert len({CharacterSubstitution("a", "b"), CharacterSubstitution("b", "a")}) == 2

    def test_hashable_equality(self):
        """Equal substitutions hash equally."""
        counts = {CharacterSubstitution("r", "d"): 2}
        assert counts[CharacterSubstitution("r", "d")] == 2

    def test_str(self):
        """str() shows the direction."""
        assert str(CharacterSubstitution("r", "d")) == "r->d"
