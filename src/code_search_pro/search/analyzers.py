"""Analyzer utilities for the problem search stack.

Composable tokenizer/filter design: a tokenizer turns text into a stream of
tokens and filters transform that stream. The index builder and the query
path share the same analyzers so index keys and query words always agree.

The standard analyzer only keeps ASCII letters and digits. Accented and other
non-ASCII letters are treated as separators and dropped, so "Café" indexes as
"caf".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int

    def copy_with(self, **updates: object) -> Token:
        data = {
            "text": self.text,
            "position": self.position,
            "start_char": self.start_char,
            "end_char": self.end_char,
        }
        data.update(updates)
        return Token(**data)


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> list[Token]:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class RegexTokenizer:
    """Regex-based tokenizer that yields word tokens.

    The default pattern is ASCII lowercase letters and digits; everything else
    (punctuation, whitespace, uppercase, non-ASCII) separates tokens.
    """

    def __init__(self, pattern: str = r"[a-z0-9]+", flags: int = re.ASCII) -> None:
        self.pattern = re.compile(pattern, flags)

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class WholeTextTokenizer:
    """Tokenizer that emits the entire input as one token."""

    def __call__(self, text: str) -> Iterator[Token]:
        if text:
            yield Token(text=text, position=0, start_char=0, end_char=len(text))


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class StandardAnalyzer:
    """Default analyzer for titles, topics and queries.

    Lowercases the whole text before tokenizing, so characters whose lowercase
    form is ASCII (such as the Kelvin sign) survive. Character offsets refer to
    the lowercased text.
    """

    def __init__(self) -> None:
        self.pipeline = AnalyzerPipeline(RegexTokenizer())

    def __call__(self, text: str) -> list[Token]:
        if not text:
            return []
        return self.pipeline(text.lower())


class KeywordAnalyzer:
    """Analyzer that treats the entire input as a single token.

    With ``lowercase=False`` the text is kept verbatim (used for identifiers).
    """

    def __init__(self, *, lowercase: bool = False) -> None:
        filters: list[TokenFilter] = [LowercaseFilter()] if lowercase else []
        self.pipeline = AnalyzerPipeline(WholeTextTokenizer(), filters)

    def __call__(self, text: str) -> list[Token]:
        return self.pipeline(text)


_ANALYZER_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "default": lambda: StandardAnalyzer(),
    "standard": lambda: StandardAnalyzer(),
    "keyword": lambda: KeywordAnalyzer(),
    "keyword-lower": lambda: KeywordAnalyzer(lowercase=True),
}


def get_analyzer(name: str | None) -> Analyzer:
    """Return analyzer by name, defaulting to the standard analyzer."""

    if name is None:
        return _ANALYZER_FACTORIES["default"]()
    normalized = name.lower()
    if normalized not in _ANALYZER_FACTORIES:
        msg = f"Unknown analyzer '{name}'. Available: {sorted(_ANALYZER_FACTORIES)}"
        raise ValueError(msg)
    return _ANALYZER_FACTORIES[normalized]()


_STANDARD = StandardAnalyzer()


def tokenize(text: str) -> list[str]:
    """Return the normalized words of ``text``.

    >>> tokenize("Two Sum II - Input Array Is Sorted")
    ['two', 'sum', 'ii', 'input', 'array', 'is', 'sorted']
    """

    return [token.text for token in _STANDARD(text)]
