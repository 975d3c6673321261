"""Substring suggestions drawn from problem titles and topics."""

from __future__ import annotations

from collections.abc import Sequence

from code_search_pro.domain.problem import Problem


def suggest(problems: Sequence[Problem], query: str, limit: int) -> list[str]:
    """Return up to ``limit`` distinct titles then topics containing ``query``.

    Matching is case-insensitive, suggestions are returned verbatim. Titles come
    first in record order, followed by topics in record and topic order.
    """

    if not query.strip():
        return []

    needle = query.lower()
    suggestions: dict[str, None] = {}

    for problem in problems:
        if needle in problem.title.lower():
            suggestions.setdefault(problem.title)

    for problem in problems:
        for topic in problem.topics:
            if needle in topic.lower():
                suggestions.setdefault(topic)

    return list(suggestions)[:limit]
