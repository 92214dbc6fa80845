"""
Graph algorithms module.

Provides pathfinding algorithms on the graph of adjacent words:
- A*: Heuristic-guided, stops on first sight of the destination
- Dijkstra: True shortest path
- Bidirectional BFS: Shortest path searched from both ends
- Longest path: Exhaustive search of simple paths from one word
"""

from wordgraph.graph.path_finder import AdjacentWordGraphPathFinder
from wordgraph.graph.result import PathResult

__all__ = ["AdjacentWordGraphPathFinder", "PathResult"]
