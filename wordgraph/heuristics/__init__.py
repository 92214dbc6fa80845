"""
Heuristics module.

Provides the priority used to order candidate words in the A* search:
- CandidateWordPriorityCalculator: Weighted combination of distance,
  destination match, and character substitution popularity
"""

from wordgraph.heuristics.priority import CandidateWordPriorityCalculator

__all__ = ["CandidateWordPriorityCalculator"]
