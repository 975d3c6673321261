"""Load problem records from the dataset JSON file.

The dataset is a JSON object with a ``questions`` array (the format the web
client fetched as ``problems-data.json``). A bare top-level array of problems
is accepted too.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
from pydantic import TypeAdapter, ValidationError

from code_search_pro.domain.problem import Problem


logger = logging.getLogger(__name__)

_PROBLEMS_ADAPTER = TypeAdapter(list[Problem])


class ProblemDataError(RuntimeError):
    """Raised when the problem dataset cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def parse_problems(payload: Any, *, source: Path | None = None) -> list[Problem]:
    """Validate a decoded dataset payload into problems."""

    path = source or Path("<memory>")
    if isinstance(payload, dict):
        if "questions" not in payload:
            raise ProblemDataError(path, "expected a 'questions' array at the top level")
        payload = payload["questions"]
    if not isinstance(payload, list):
        raise ProblemDataError(path, f"expected a list of problems, got {type(payload).__name__}")

    try:
        return _PROBLEMS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise ProblemDataError(path, f"invalid problem record: {exc.error_count()} validation error(s)") from exc


def load_problems(path: Path) -> list[Problem]:
    """Read and validate every problem in ``path``."""

    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ProblemDataError(path, f"cannot read file ({exc.strerror or exc})") from exc

    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ProblemDataError(path, f"invalid JSON: {exc}") from exc

    problems = parse_problems(payload, source=path)
    logger.info("Loaded %d problems from %s", len(problems), path)
    return problems
