"""Context propagation for correlating log lines with the query that caused them."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator
from uuid import uuid4


query_context: ContextVar[dict | None] = ContextVar("query_context", default=None)


def generate_query_id() -> str:
    """Generate a 16-char hex query ID."""
    return uuid4().hex[:16]


def get_query_context() -> dict:
    """Get the current query context, empty outside of a query."""
    return query_context.get() or {}


def set_query_context(query_id: str, **extra: object) -> None:
    """Set query context for the current execution context."""
    query_context.set({"query_id": query_id, **extra})


@contextmanager
def bind_query(operation: str, query: str) -> Iterator[str]:
    """Bind a fresh query ID for the duration of one engine operation."""

    query_id = generate_query_id()
    token = query_context.set({"query_id": query_id, "operation": operation, "query": query})
    try:
        yield query_id
    finally:
        query_context.reset(token)
