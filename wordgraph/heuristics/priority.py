"""
Priority of candidate words during the A* search.

The priority is a weighted average of four scores, each between 0.0 (most
promising) and 1.0 (least promising):

    distance                 distance from source / maximum distance
    destination match        1 - characters matching the destination by position / length
    change-to popularity     1 - how often the introduced character is substituted away
                                 / the highest such frequency
    substitution popularity  1 - how often the exact (from, to) substitution occurs
                                 / the highest such frequency
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Mapping

import numpy as np

from wordgraph.config import DEFAULT_MAX_DISTANCE
from wordgraph.data.words import CharacterSubstitution, find_differing_characters

logger = logging.getLogger(__name__)

ScoreFunction = Callable[[str, str, str, int], float]


class CandidateWordPriorityCalculator:
    """
    Scores a candidate word for exploration; lower priority values explore first.

    The frequency tables come from the vocabulary (see
    wordgraph.data.loader.count_substitutions) and are only read.
    """

    def __init__(
        self,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        distance_weight: int = 1,
        destination_match_weight: int = 1,
        change_to_character_weight: int = 1,
        character_substitution_weight: int = 1,
        from_character_frequencies: Mapping[str, int] | None = None,
        character_substitution_frequencies: Mapping[CharacterSubstitution, int] | None = None,
    ) -> None:
        """
        Initialize the calculator.

        Args:
            max_distance: Largest source to candidate distance that will be scored
            distance_weight: Weight of the distance score
            destination_match_weight: Weight of the destination match score
            change_to_character_weight: Weight of the change-to character popularity score
            character_substitution_weight: Weight of the substitution popularity score
            from_character_frequencies: Substitutions per 'from' character
            character_substitution_frequencies: Occurrences of each substitution

        Raises:
            ValueError: If max_distance < 1, a weight is negative, or all weights are 0
        """
        if max_distance < 1:
            raise ValueError("Parameter 'max_distance' must be greater than or equal to 1.")

        weights = {
            "distance_weight": distance_weight,
            "destination_match_weight": destination_match_weight,
            "change_to_character_weight": change_to_character_weight,
            "character_substitution_weight": character_substitution_weight,
        }
        for name, weight in weights.items():
            if weight < 0:
                raise ValueError(f"Parameter '{name}' must be greater than or equal to 0.")
        if not any(weights.values()):
            names = ", ".join(f"'{name}'" for name in weights)
            raise ValueError(f"At least one of parameters {names} must be greater than 0.")

        self._max_distance = max_distance
        self._from_character_frequencies = from_character_frequencies or Counter()
        self._substitution_frequencies = character_substitution_frequencies or Counter()
        self._max_from_character_frequency = max(self._from_character_frequencies.values(), default=0)
        self._max_substitution_frequency = max(self._substitution_frequencies.values(), default=0)

        # Zero-weight scores are skipped entirely
        scorers: list[ScoreFunction] = [
            self._distance_score,
            self._destination_match_score,
            self._change_to_character_score,
            self._character_substitution_score,
        ]
        active = [(scorer, weight) for scorer, weight in zip(scorers, weights.values()) if weight > 0]
        self._scorers = [scorer for scorer, _ in active]
        raw_weights = np.array([weight for _, weight in active], dtype=np.float64)
        self._weights = raw_weights / raw_weights.sum()

        logger.debug(f"Priority weights: {weights}, max distance {max_distance}")

    @property
    def max_distance(self) -> int:
        return self._max_distance

    def calculate_priority(
        self,
        current_word: str,
        candidate_word: str,
        destination_word: str,
        distance: int,
    ) -> float:
        """
        Calculate the priority of moving from current_word to candidate_word.

        Args:
            current_word: Word being expanded
            candidate_word: Adjacent word being scored
            destination_word: Word the search is looking for
            distance: Distance from the source word to candidate_word

        Returns:
            Priority between 0.0 (highest) and 1.0 (lowest)

        Raises:
            ValueError: If a word is empty, the lengths differ, or distance is
                outside [1, max_distance]
        """
        if len(current_word) < 1:
            raise ValueError("Parameter 'current_word' must be greater than or equal to 1 character in length.")
        if len(candidate_word) < 1:
            raise ValueError("Parameter 'candidate_word' must be greater than or equal to 1 character in length.")
        if len(destination_word) < 1:
            raise ValueError("Parameter 'destination_word' must be greater than or equal to 1 character in length.")
        if len(current_word) != len(candidate_word):
            raise ValueError("Parameters 'current_word' and 'candidate_word' must have the same length.")
        if len(candidate_word) != len(destination_word):
            raise ValueError("Parameters 'candidate_word' and 'destination_word' must have the same length.")
        if distance < 1:
            raise ValueError("Parameter 'distance' must be greater than or equal to 1.")
        if distance > self._max_distance:
            raise ValueError(
                f"Parameter 'distance' ({distance}) cannot be greater than "
                f"max_distance ({self._max_distance})."
            )

        scores = np.array(
            [scorer(current_word, candidate_word, destination_word, distance) for scorer in self._scorers],
            dtype=np.float64,
        )
        # Rounding in the weighted sum can stray just outside [0.0, 1.0]
        return float(np.clip(np.dot(scores, self._weights), 0.0, 1.0))

    # =========================================================================
    # Scores
    # =========================================================================

    def _distance_score(self, current_word: str, candidate_word: str, destination_word: str, distance: int) -> float:
        return distance / self._max_distance

    def _destination_match_score(self, current_word: str, candidate_word: str, destination_word: str, distance: int) -> float:
        matching = sum(1 for a, b in zip(candidate_word, destination_word) if a == b)
        return 1.0 - matching / len(candidate_word)

    def _change_to_character_score(self, current_word: str, candidate_word: str, destination_word: str, distance: int) -> float:
        if self._max_from_character_frequency == 0:
            return 1.0
        change_to = find_differing_characters(current_word, candidate_word).to_character
        frequency = self._from_character_frequencies.get(change_to, 0)
        return 1.0 - frequency / self._max_from_character_frequency

    def _character_substitution_score(self, current_word: str, candidate_word: str, destination_word: str, distance: int) -> float:
        if self._max_substitution_frequency == 0:
            return 1.0
        substitution = find_differing_characters(current_word, candidate_word)
        frequency = self._substitution_frequencies.get(substitution, 0)
        return 1.0 - frequency / self._max_substitution_frequency
