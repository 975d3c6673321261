"""In-memory search over coding-problem metadata."""

from code_search_pro.domain import IndexStats, MatchKind, Problem, SearchResult
from code_search_pro.loader import ProblemDataError, load_problems
from code_search_pro.problem_search_engine import InvalidBoundError, ProblemSearchEngine


__all__ = [
    "IndexStats",
    "InvalidBoundError",
    "MatchKind",
    "Problem",
    "ProblemDataError",
    "ProblemSearchEngine",
    "SearchResult",
    "load_problems",
]
