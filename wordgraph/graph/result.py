"""
Result of a path search.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PathResult:
    """
    Path found by one search, with the work done to find it.

    Attributes:
        algorithm: Name of the search that produced the path
        path: Words from source to destination (empty if no path was found)
        edges_explored: Number of adjacent word relationships examined
    """

    algorithm: str
    path: list[str] = field(default_factory=list)
    edges_explored: int = 0

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of edges in the path (0 if none found)."""
        return max(len(self.path) - 1, 0)

    def __str__(self) -> str:
        if not self.path:
            return f"{self.algorithm}: no path ({self.edges_explored} edges explored)"
        return (
            f"{self.algorithm}: {' -> '.join(self.path)} "
            f"({self.length} steps, {self.edges_explored} edges explored)"
        )
