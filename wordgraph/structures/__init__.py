"""
Data structures module.

Provides containers used by the searches:
- PriorityQueue: Min/max priority queue with O(1) priority lookup
"""

from wordgraph.structures.priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
