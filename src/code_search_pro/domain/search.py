"""Domain models for search functionality.

Value objects returned by the engine's public operations. They are immutable
so a result handed to a caller cannot drift from the index that produced it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from code_search_pro.domain.problem import Problem


class MatchKind(str, Enum):
    """Why a query word matched an index key."""

    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"


class SearchResult(BaseModel):
    """Value object for a single ranked search hit.

    ``matched_fields`` holds the distinct match kinds (as plain strings) that
    contributed to ``score``.
    """

    model_config = ConfigDict(frozen=True)

    problem: Problem
    score: int
    matched_fields: frozenset[str] = Field(default_factory=frozenset)


class DifficultyCounts(BaseModel):
    """Number of indexed problems per difficulty."""

    model_config = ConfigDict(frozen=True)

    easy: int = 0
    medium: int = 0
    hard: int = 0

    @property
    def total(self) -> int:
        return self.easy + self.medium + self.hard


class IndexStats(BaseModel):
    """Snapshot of what the engine indexed at construction."""

    model_config = ConfigDict(frozen=True)

    total_problems: int
    index_size: int
    difficulties: DifficultyCounts
