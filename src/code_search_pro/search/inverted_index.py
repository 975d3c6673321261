"""Token -> record position inverted index.

Built once from the full problem sequence and read-only afterwards. Record
positions are 0-based offsets into that sequence.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from types import MappingProxyType

from code_search_pro.domain.problem import Problem
from code_search_pro.search.analyzers import get_analyzer


class InvertedIndex:
    """Immutable mapping from token to the positions of problems containing it.

    Every key maps to a non-empty frozenset. Keys iterate in first-seen order,
    which follows record order.
    """

    def __init__(self, postings: dict[str, frozenset[int]]) -> None:
        self._postings = MappingProxyType(postings)

    @classmethod
    def build(cls, problems: Sequence[Problem]) -> InvertedIndex:
        """Index titles, topics, difficulty and identifier of every problem."""

        text_analyzer = get_analyzer("standard")
        difficulty_analyzer = get_analyzer("keyword-lower")
        id_analyzer = get_analyzer("keyword")

        building: dict[str, set[int]] = {}

        def add(tokens, position: int) -> None:
            for token in tokens:
                building.setdefault(token.text, set()).add(position)

        for position, problem in enumerate(problems):
            add(text_analyzer(problem.title), position)
            for topic in problem.topics:
                add(text_analyzer(topic), position)
            add(difficulty_analyzer(problem.difficulty), position)
            add(id_analyzer(problem.frontend_id), position)

        return cls({term: frozenset(positions) for term, positions in building.items()})

    def postings(self, term: str) -> frozenset[int]:
        """Return positions indexed under ``term``, or an empty set."""
        return self._postings.get(term, frozenset())

    def terms(self) -> Iterator[str]:
        """Iterate over all distinct index keys."""
        return iter(self._postings)

    def items(self):
        return self._postings.items()

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings
