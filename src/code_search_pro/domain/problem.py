"""Problem records - the immutable input to the search engine.

Records are supplied by a loader (see ``code_search_pro.loader``) and are never
mutated by the engine. Only ``frontend_id``, ``title``, ``difficulty`` and
``topics`` take part in indexing; the remaining fields ride along so callers
can render a full problem from a search hit.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Difficulty = Literal["Easy", "Medium", "Hard"]

DIFFICULTIES: tuple[Difficulty, ...] = ("Easy", "Medium", "Hard")


class Example(BaseModel):
    """Worked example attached to a problem statement."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    example_num: int
    example_text: str = ""
    images: tuple[str, ...] = ()


class Problem(BaseModel):
    """Value object for a single coding problem.

    ``frontend_id`` is the identifier users see (e.g. ``"1"`` for Two Sum) and is
    indexed verbatim, so its casing must match what callers search for.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    frontend_id: str
    title: str
    difficulty: Difficulty
    topics: tuple[str, ...] = ()

    problem_id: str = ""
    problem_slug: str = ""
    description: str = ""
    examples: tuple[Example, ...] = ()
    constraints: tuple[str, ...] = ()
    follow_ups: tuple[str, ...] = ()
    hints: tuple[str, ...] = ()
    code_snippets: dict[str, str] = Field(default_factory=dict)
    solution: str | None = None
