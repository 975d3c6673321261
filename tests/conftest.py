"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path
import sys

import orjson
import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from code_search_pro.domain import Problem  # noqa: E402


SAMPLE_QUESTIONS = [
    {
        "frontend_id": "1",
        "problem_id": "1",
        "title": "Two Sum",
        "problem_slug": "two-sum",
        "difficulty": "Easy",
        "topics": ["Array", "Hash Table"],
        "description": "Given an array of integers nums and an integer target...",
        "examples": [{"example_num": 1, "example_text": "Input: nums = [2,7,11,15], target = 9", "images": []}],
        "constraints": ["2 <= nums.length <= 10^4"],
        "hints": ["Use a hash map."],
        "code_snippets": {"python3": "class Solution:\n    def twoSum(self, nums, target): ..."},
    },
    {
        "frontend_id": "200",
        "problem_id": "200",
        "title": "Number of Islands",
        "problem_slug": "number-of-islands",
        "difficulty": "Medium",
        "topics": ["Graph"],
    },
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep settings independent of the developer's shell and any local .env."""

    for key in list(os.environ):
        if key.upper().startswith("CODE_SEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made by configure_logging."""

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_problems() -> list[Problem]:
    return [Problem.model_validate(item) for item in SAMPLE_QUESTIONS]


@pytest.fixture
def make_problem():
    """Build a minimal problem with sensible defaults."""

    def _make(title: str, *, frontend_id: str = "0", difficulty: str = "Easy", topics=()) -> Problem:
        return Problem(frontend_id=frontend_id, title=title, difficulty=difficulty, topics=tuple(topics))

    return _make


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    path = tmp_path / "problems-data.json"
    path.write_bytes(orjson.dumps({"questions": SAMPLE_QUESTIONS}))
    return path
