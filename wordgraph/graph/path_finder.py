"""
Path finding in the graph of adjacent words.

Vertices are the words in a CharacterTrie and edges join words which differ
by one character. Neighbors are generated from the trie as each word is
expanded, so the graph is never built.

Searches:
- A*: priority-ordered, stops as soon as the destination is seen (not
  guaranteed shortest)
- Dijkstra: priority by distance, stops when the destination is dequeued
  (shortest)
- Bidirectional BFS: frontiers from both ends, expanded a layer at a time,
  meet in the middle (shortest)
- Longest path: exhaustive depth-first search of simple paths from a word
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from wordgraph.config import ALGORITHMS, PRIORITY_DENOMINATOR
from wordgraph.graph.result import PathResult
from wordgraph.heuristics import CandidateWordPriorityCalculator
from wordgraph.structures import PriorityQueue
from wordgraph.trie import CharacterTrie, find_adjacent_words

logger = logging.getLogger(__name__)


class AdjacentWordGraphPathFinder:
    """
    Finds paths between words of a vocabulary trie.

    Each call owns its queue, visited set and predecessor maps, so one
    finder can serve any number of searches over the same trie.
    """

    def __init__(
        self,
        trie: CharacterTrie,
        priority_calculator: CandidateWordPriorityCalculator | None = None,
    ) -> None:
        """
        Initialize the path finder.

        Args:
            trie: Trie containing every word in the graph
            priority_calculator: Scores candidates for A*. Defaults to a
                calculator with equal weights and no substitution statistics
        """
        self._trie = trie
        self._priority_calculator = priority_calculator or CandidateWordPriorityCalculator()

    def find_path(self, source: str, destination: str, algorithm: str = "astar") -> PathResult:
        """
        Find a path using a search chosen by name.

        Args:
            source: Word to start from
            destination: Word to reach
            algorithm: One of "astar", "dijkstra", "bidirectional"

        Raises:
            ValueError: If the algorithm is unknown or the words are invalid
        """
        searches: dict[str, Callable[[str, str], PathResult]] = {
            "astar": self.find_path_via_a_star,
            "dijkstra": self.find_shortest_path_via_dijkstra,
            "bidirectional": self.find_path_via_bidirectional_bfs,
        }

        if algorithm not in searches:
            available = ", ".join(ALGORITHMS)
            raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")

        return searches[algorithm](source, destination)

    # =========================================================================
    # A*
    # =========================================================================

    def find_path_via_a_star(self, source: str, destination: str) -> PathResult:
        """
        Find a path using A* with the candidate word priority.

        The search ends as soon as the destination appears as a neighbor of
        the word being expanded, so the path is not always the shortest.

        Returns:
            PathResult; the path is empty if the destination is unreachable
        """
        self._check_path_parameters(source, destination)
        logger.info(f"A* search: '{source}' -> '{destination}'")

        queue: PriorityQueue[str] = PriorityQueue()
        visited: set[str] = set()
        previous: dict[str, str] = {}
        distances: dict[str, int] = {source: 0}
        edges_explored = 0
        path_found = False

        queue.enqueue(source, 0.0)

        while queue and not path_found:
            current = queue.dequeue_minimum()
            candidate_distance = distances[current] + 1
            logger.debug(f"Expanding '{current}' (distance {distances[current]})")

            for candidate in find_adjacent_words(self._trie, current):
                if candidate == destination:
                    previous[candidate] = current
                    edges_explored += 1
                    path_found = True
                    break

                if candidate in visited:
                    continue

                priority = self._priority_calculator.calculate_priority(
                    current, candidate, destination, candidate_distance
                )
                if candidate in queue:
                    # Lower value is higher priority
                    if priority < queue.get_priority(candidate):
                        queue.remove(candidate)
                        queue.enqueue(candidate, priority)
                        previous[candidate] = current
                        distances[candidate] = candidate_distance
                else:
                    queue.enqueue(candidate, priority)
                    previous[candidate] = current
                    distances[candidate] = candidate_distance
                edges_explored += 1

            visited.add(current)

        path = self._walk_back(previous, destination) if path_found else []
        return self._finish("astar", source, destination, path, edges_explored)

    # =========================================================================
    # Dijkstra
    # =========================================================================

    def find_shortest_path_via_dijkstra(self, source: str, destination: str) -> PathResult:
        """
        Find a shortest path using Dijkstra's algorithm.

        All edges have length 1; the priority of a word is its distance from
        the source divided by PRIORITY_DENOMINATOR. The search ends when the
        destination is dequeued.

        Returns:
            PathResult; the path is empty if the destination is unreachable
        """
        self._check_path_parameters(source, destination)
        logger.info(f"Dijkstra search: '{source}' -> '{destination}'")

        queue: PriorityQueue[str] = PriorityQueue()
        visited: set[str] = set()
        previous: dict[str, str] = {}
        distances: dict[str, int] = {source: 0}
        edges_explored = 0

        queue.enqueue(source, 0.0)

        while queue:
            current = queue.dequeue_minimum()
            candidate_distance = distances[current] + 1
            candidate_priority = candidate_distance / PRIORITY_DENOMINATOR

            for candidate in find_adjacent_words(self._trie, current):
                if candidate in visited:
                    continue

                if candidate in queue:
                    if candidate_priority < queue.get_priority(candidate):
                        queue.remove(candidate)
                        queue.enqueue(candidate, candidate_priority)
                        previous[candidate] = current
                        distances[candidate] = candidate_distance
                else:
                    queue.enqueue(candidate, candidate_priority)
                    previous[candidate] = current
                    distances[candidate] = candidate_distance
                edges_explored += 1

            visited.add(current)

            if current == destination:
                break

        path = self._walk_back(previous, destination) if destination in previous else []
        return self._finish("dijkstra", source, destination, path, edges_explored)

    # =========================================================================
    # Bidirectional BFS
    # =========================================================================

    def find_path_via_bidirectional_bfs(self, source: str, destination: str) -> PathResult:
        """
        Find a shortest path with breadth-first searches from both ends.

        Each round expands a whole layer of the source side, then a whole
        layer of the destination side. A neighbor already reached by the
        other side joins the two halves; the shortest join found in the
        layer that first meets the other side gives the path.

        Returns:
            PathResult; the path is empty if the destination is unreachable
        """
        self._check_path_parameters(source, destination)
        logger.info(f"Bidirectional BFS: '{source}' -> '{destination}'")

        # Maps each reached word to the word it was reached from
        forward_previous: dict[str, str | None] = {source: None}
        backward_previous: dict[str, str | None] = {destination: None}
        forward_distances = {source: 0}
        backward_distances = {destination: 0}
        forward_queue = deque([source])
        # Only words in the trie can be reached, so nothing meets a missing destination
        backward_queue = deque([destination] if destination in self._trie else [])
        edges_explored = 0
        join: tuple[str, str] | None = None

        # Once either side runs out of words the two can no longer meet
        while forward_queue and backward_queue and join is None:
            join, explored = self._bfs_layer(
                forward_queue, forward_previous, forward_distances, backward_distances
            )
            edges_explored += explored
            if join is None:
                backward_join, explored = self._bfs_layer(
                    backward_queue, backward_previous, backward_distances, forward_distances
                )
                edges_explored += explored
                if backward_join is not None:
                    join = (backward_join[1], backward_join[0])

        path: list[str] = []
        if join is not None:
            forward_word, backward_word = join
            word: str | None = forward_word
            while word is not None:
                path.append(word)
                word = forward_previous[word]
            path.reverse()

            word = backward_word
            while word is not None:
                path.append(word)
                word = backward_previous[word]

        return self._finish("bidirectional", source, destination, path, edges_explored)

    def _bfs_layer(
        self,
        queue: deque[str],
        previous: dict[str, str | None],
        distances: dict[str, int],
        other_distances: dict[str, int],
    ) -> tuple[tuple[str, str] | None, int]:
        """
        Expand every word at the current depth of one frontier.

        Returns:
            Tuple of ((word on this side, word on the other side) of the
            shortest join, or None, edges explored)
        """
        best_join: tuple[str, str] | None = None
        best_length = 0
        explored = 0

        for _ in range(len(queue)):
            current = queue.popleft()
            for candidate in find_adjacent_words(self._trie, current):
                if candidate in other_distances:
                    explored += 1
                    length = distances[current] + 1 + other_distances[candidate]
                    if best_join is None or length < best_length:
                        best_join = (current, candidate)
                        best_length = length
                elif candidate not in previous:
                    previous[candidate] = current
                    distances[candidate] = distances[current] + 1
                    queue.append(candidate)
                    explored += 1

        return best_join, explored

    # =========================================================================
    # Longest path
    # =========================================================================

    def find_longest_path_from(self, source: str) -> PathResult:
        """
        Find the longest simple path starting at a word.

        Tries every path which doesn't revisit a word, so the cost grows
        exponentially with the size of the word's connected component. Only
        suitable for small vocabularies.

        Raises:
            ValueError: If source is empty
        """
        if len(source) == 0:
            raise ValueError("Parameter 'source' cannot be an empty string.")
        logger.info(f"Longest path search from '{source}'")

        current_path = [source]
        on_path = {source}
        longest: list[str] = []
        edges_explored = 0

        def recurse(word: str) -> None:
            nonlocal longest, edges_explored
            if len(current_path) > len(longest):
                longest = list(current_path)

            for next_word in find_adjacent_words(self._trie, word):
                edges_explored += 1
                if next_word in on_path:
                    continue
                current_path.append(next_word)
                on_path.add(next_word)
                recurse(next_word)
                on_path.remove(next_word)
                current_path.pop()

        recurse(source)

        result = PathResult(algorithm="longest", path=longest, edges_explored=edges_explored)
        logger.info(str(result))
        return result

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _check_path_parameters(source: str, destination: str) -> None:
        if source == destination:
            raise ValueError("Parameter 'destination' cannot be the same as parameter 'source'.")
        if len(source) < 1:
            raise ValueError("The length of parameter 'source' must be greater than or equal to 1.")
        if len(source) != len(destination):
            raise ValueError("Parameter 'source' must have the same length as parameter 'destination'.")

    @staticmethod
    def _walk_back(previous: dict[str, str], destination: str) -> list[str]:
        """Rebuild the path ending at destination from the predecessor map."""
        path = [destination]
        word = destination
        while word in previous:
            word = previous[word]
            path.append(word)
        path.reverse()
        return path

    @staticmethod
    def _finish(
        algorithm: str,
        source: str,
        destination: str,
        path: list[str],
        edges_explored: int,
    ) -> PathResult:
        result = PathResult(algorithm=algorithm, path=path, edges_explored=edges_explored)
        if result.found:
            logger.info(str(result))
        else:
            logger.warning(
                f"{algorithm}: no path from '{source}' to '{destination}' "
                f"({edges_explored} edges explored)"
            )
        return result
