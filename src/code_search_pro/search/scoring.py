"""Fixed-weight match scoring against the inverted index.

Each query word is compared with every index key under three rules:

- exact:    key == word                                   -> +10
- prefix:   key starts with word, key != word             -> +5
- contains: word is inside key but key does not start with it -> +2

Weights from every word and every rule add up per record. The prefix and
contains rules scan the full vocabulary for each query word, so a query costs
O(words x distinct keys).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from code_search_pro.domain.search import MatchKind
from code_search_pro.search.inverted_index import InvertedIndex


EXACT_WEIGHT = 10
PREFIX_WEIGHT = 5
CONTAINS_WEIGHT = 2


@dataclass
class CandidateScore:
    """Running score for one record position."""

    score: int = 0
    matched: set[str] = field(default_factory=set)


class ScoreAccumulator:
    """Query-scoped scores keyed by record position.

    A position only enters the accumulator when a rule fires for it, so every
    entry has a positive score and at least one match kind.
    """

    def __init__(self) -> None:
        self._candidates: dict[int, CandidateScore] = {}

    def add(self, positions: Iterable[int], weight: int, kind: MatchKind) -> None:
        for position in positions:
            candidate = self._candidates.get(position)
            if candidate is None:
                candidate = self._candidates[position] = CandidateScore()
            candidate.score += weight
            candidate.matched.add(kind.value)

    def ranked(self, limit: int) -> list[tuple[int, int, frozenset[str]]]:
        """Return ``(position, score, kinds)`` by descending score, ties by position."""

        ordered = sorted(self._candidates.items(), key=lambda item: (-item[1].score, item[0]))
        return [(position, entry.score, frozenset(entry.matched)) for position, entry in ordered[:limit]]

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, position: object) -> bool:
        return position in self._candidates


def score_words(index: InvertedIndex, words: Iterable[str]) -> ScoreAccumulator:
    """Apply the exact/prefix/contains rules for each query word."""

    accumulator = ScoreAccumulator()
    for word in words:
        if word in index:
            accumulator.add(index.postings(word), EXACT_WEIGHT, MatchKind.EXACT)

        for term, positions in index.items():
            if term == word or word not in term:
                continue
            if term.startswith(word):
                accumulator.add(positions, PREFIX_WEIGHT, MatchKind.PREFIX)
            else:
                accumulator.add(positions, CONTAINS_WEIGHT, MatchKind.CONTAINS)
    return accumulator
