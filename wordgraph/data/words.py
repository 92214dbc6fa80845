"""
Word comparison helpers for adjacent words.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterSubstitution:
    """
    Substitution of one character for another, as between two adjacent words.

    Ordered: ('a' -> 'e') and ('e' -> 'a') are different substitutions.

    Attributes:
        from_character: Character in the first word
        to_character: Character replacing it in the second word
    """

    from_character: str
    to_character: str

    def __str__(self) -> str:
        return f"{self.from_character}->{self.to_character}"


def find_differing_characters(word1: str, word2: str) -> CharacterSubstitution:
    """
    Find the single character that differs between two adjacent words.

    Args:
        word1: The first word
        word2: The second word

    Returns:
        The substitution from word1's character to word2's character

    Raises:
        ValueError: If either word is empty, the lengths differ, the words
            are the same, or they differ by more than one character
    """
    if len(word1) < 1:
        raise ValueError("Parameter 'word1' must be greater than or equal to 1 character in length.")
    if len(word2) < 1:
        raise ValueError("Parameter 'word2' must be greater than or equal to 1 character in length.")
    if len(word1) != len(word2):
        raise ValueError("Parameters 'word1' and 'word2' must have the same length.")

    substitution = None
    for char1, char2 in zip(word1, word2):
        if char1 != char2:
            if substitution is not None:
                raise ValueError("Parameters 'word1' and 'word2' differ by more than 1 character.")
            substitution = CharacterSubstitution(char1, char2)

    if substitution is None:
        raise ValueError("Parameters 'word1' and 'word2' are the same.")
    return substitution
