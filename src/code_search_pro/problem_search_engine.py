"""Problem Search Engine - deep module over the in-memory index.

Constructed once from the full problem collection, after which it only
answers read-only queries:

- search(query, max_results) -> list[SearchResult]
- autocomplete(query, max_suggestions) -> list[str]
- stats() -> IndexStats

Nothing is mutated after construction, so one engine can be shared by
concurrent readers without locking. Supporting new records means building a
new engine.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
import logging
from pathlib import Path
import time

from code_search_pro.domain.problem import Problem
from code_search_pro.domain.search import DifficultyCounts, IndexStats, SearchResult
from code_search_pro.loader import load_problems
from code_search_pro.observability.context import bind_query
from code_search_pro.search.analyzers import tokenize
from code_search_pro.search.autocomplete import suggest
from code_search_pro.search.inverted_index import InvertedIndex
from code_search_pro.search.scoring import score_words


logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 20
DEFAULT_MAX_SUGGESTIONS = 8


class InvalidBoundError(ValueError):
    """Raised when a result or suggestion bound is not a positive integer."""


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidBoundError(f"{name} must be a positive integer, got {value!r}")


class ProblemSearchEngine:
    """Ranked search and autocomplete over a fixed set of problems."""

    def __init__(self, problems: Iterable[Problem]):
        started = time.perf_counter()
        self._problems: tuple[Problem, ...] = tuple(problems)
        self._index = InvertedIndex.build(self._problems)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "Indexed %d problems into %d terms in %.1fms",
            len(self._problems),
            len(self._index),
            elapsed_ms,
        )

    @classmethod
    def from_file(cls, path: Path) -> ProblemSearchEngine:
        """Load the problem dataset at ``path`` and index it."""
        return cls(load_problems(path))

    @property
    def problems(self) -> tuple[Problem, ...]:
        return self._problems

    @property
    def index(self) -> InvertedIndex:
        return self._index

    def search(self, query: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[SearchResult]:
        """Rank problems for a free-text query.

        Args:
            query: Free text; empty or whitespace-only yields no results
            max_results: Positive bound on the number of results

        Returns:
            Results by descending score, equal scores in original record order

        Raises:
            InvalidBoundError: If max_results is not positive
        """
        _require_positive("max_results", max_results)

        words = tokenize(query)
        if not words:
            return []

        with bind_query("search", query):
            started = time.perf_counter()
            accumulator = score_words(self._index, words)
            results = [
                SearchResult(problem=self._problems[position], score=score, matched_fields=kinds)
                for position, score, kinds in accumulator.ranked(max_results)
            ]
            logger.debug(
                "Search matched %d problems, returning %d in %.2fms",
                len(accumulator),
                len(results),
                (time.perf_counter() - started) * 1000,
            )
        return results

    def autocomplete(self, query: str, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS) -> list[str]:
        """Suggest titles and topics containing ``query`` (case-insensitive).

        Raises:
            InvalidBoundError: If max_suggestions is not positive
        """
        _require_positive("max_suggestions", max_suggestions)

        with bind_query("autocomplete", query):
            suggestions = suggest(self._problems, query, max_suggestions)
            logger.debug("Autocomplete produced %d suggestions", len(suggestions))
        return suggestions

    def stats(self) -> IndexStats:
        """Return problem count, distinct index key count and difficulty breakdown."""

        counts = Counter(problem.difficulty for problem in self._problems)
        return IndexStats(
            total_problems=len(self._problems),
            index_size=len(self._index),
            difficulties=DifficultyCounts(
                easy=counts["Easy"],
                medium=counts["Medium"],
                hard=counts["Hard"],
            ),
        )
