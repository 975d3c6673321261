"""Command line access to the problem search engine.

Usage:
    code-search-pro search "two sum"               # ranked results table
    code-search-pro search "graph" --limit 5 --json
    code-search-pro autocomplete "isl"             # one suggestion per line
    code-search-pro --data problems.json stats
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

import orjson
from rich.console import Console
from rich.table import Table

from code_search_pro.config import Settings
from code_search_pro.domain.search import IndexStats, SearchResult
from code_search_pro.loader import ProblemDataError
from code_search_pro.observability.logging import configure_logging
from code_search_pro.problem_search_engine import InvalidBoundError, ProblemSearchEngine


logger = logging.getLogger(__name__)


def build_argument_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="code-search-pro", description="Search coding problems")
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.data_path,
        help=f"Problem dataset JSON file (default: {settings.data_path})",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of tables")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Rank problems for a query")
    search_parser.add_argument("query")
    search_parser.add_argument("--limit", type=int, default=settings.max_results, help="Maximum results")

    complete_parser = subparsers.add_parser("autocomplete", help="Suggest titles and topics")
    complete_parser.add_argument("query")
    complete_parser.add_argument("--limit", type=int, default=settings.max_suggestions, help="Maximum suggestions")

    subparsers.add_parser("stats", help="Show index statistics")
    return parser


def _dump_json(console: Console, payload: object) -> None:
    text = orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _render_results(console: Console, results: list[SearchResult], as_json: bool) -> None:
    if as_json:
        _dump_json(
            console,
            [
                {
                    "id": result.problem.frontend_id,
                    "title": result.problem.title,
                    "difficulty": result.problem.difficulty,
                    "topics": list(result.problem.topics),
                    "score": result.score,
                    "matched_fields": sorted(result.matched_fields),
                }
                for result in results
            ],
        )
        return

    if not results:
        console.print("No matching problems.")
        return

    table = Table(title="Search Results")
    table.add_column("#", justify="right")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Difficulty", style="magenta")
    table.add_column("Score", justify="right")
    table.add_column("Matched")
    for rank, result in enumerate(results, start=1):
        table.add_row(
            str(rank),
            result.problem.frontend_id,
            result.problem.title,
            result.problem.difficulty,
            str(result.score),
            ", ".join(sorted(result.matched_fields)),
        )
    console.print(table)


def _render_stats(console: Console, stats: IndexStats, as_json: bool) -> None:
    if as_json:
        _dump_json(console, stats.model_dump())
        return

    table = Table(title="Index Statistics")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta", justify="right")
    table.add_row("Problems", str(stats.total_problems))
    table.add_row("Index terms", str(stats.index_size))
    table.add_row("Easy", str(stats.difficulties.easy))
    table.add_row("Medium", str(stats.difficulties.medium))
    table.add_row("Hard", str(stats.difficulties.hard))
    console.print(table)


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    settings = Settings()
    parser = build_argument_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, json_output=settings.log_json)
    console = console or Console()
    err_console = Console(stderr=True)

    try:
        engine = ProblemSearchEngine.from_file(args.data)

        if args.command == "search":
            _render_results(console, engine.search(args.query, args.limit), args.json)
        elif args.command == "autocomplete":
            suggestions: list[str] = []
            if settings.should_autocomplete(args.query):
                suggestions = engine.autocomplete(args.query, args.limit)
            if args.json:
                _dump_json(console, suggestions)
            else:
                for suggestion in suggestions:
                    console.print(suggestion, markup=False, highlight=False, soft_wrap=True)
        else:
            _render_stats(console, engine.stats(), args.json)
    except (ProblemDataError, InvalidBoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        err_console.print(f"Error: {exc}", markup=False, highlight=False, soft_wrap=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
