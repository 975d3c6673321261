"""Observability module for structured logging and query correlation."""

from code_search_pro.observability.context import (
    bind_query,
    get_query_context,
    query_context,
    set_query_context,
)
from code_search_pro.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "bind_query",
    "configure_logging",
    "get_query_context",
    "query_context",
    "set_query_context",
]
