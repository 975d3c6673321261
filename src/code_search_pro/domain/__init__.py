"""Domain layer - pure data with no infrastructure dependencies.

- Problem: the immutable record the engine indexes
- SearchResult / IndexStats: value objects returned by the engine
"""

from code_search_pro.domain.problem import DIFFICULTIES, Difficulty, Example, Problem
from code_search_pro.domain.search import DifficultyCounts, IndexStats, MatchKind, SearchResult


__all__ = [
    "DIFFICULTIES",
    "Difficulty",
    "DifficultyCounts",
    "Example",
    "IndexStats",
    "MatchKind",
    "Problem",
    "SearchResult",
]
