"""Unit tests for the token -> position inverted index."""

import pytest

from code_search_pro.search.inverted_index import InvertedIndex


pytestmark = pytest.mark.unit


def test_indexes_title_topics_difficulty_and_id(sample_problems):
    index = InvertedIndex.build(sample_problems)

    assert index.postings("two") == frozenset({0})
    assert index.postings("hash") == frozenset({0})
    assert index.postings("table") == frozenset({0})
    assert index.postings("easy") == frozenset({0})
    assert index.postings("1") == frozenset({0})
    assert index.postings("islands") == frozenset({1})
    assert index.postings("graph") == frozenset({1})
    assert index.postings("medium") == frozenset({1})
    assert index.postings("200") == frozenset({1})


def test_vocabulary_is_exactly_the_indexed_tokens(sample_problems):
    index = InvertedIndex.build(sample_problems)

    assert set(index.terms()) == {
        "two",
        "sum",
        "array",
        "hash",
        "table",
        "easy",
        "1",
        "number",
        "of",
        "islands",
        "graph",
        "medium",
        "200",
    }
    assert len(index) == 13


def test_shared_tokens_collect_all_positions(make_problem):
    index = InvertedIndex.build(
        [
            make_problem("Two Sum", frontend_id="1"),
            make_problem("Two Sum II", frontend_id="167", difficulty="Medium"),
            make_problem("Three Sum", frontend_id="15", difficulty="Medium"),
        ]
    )

    assert index.postings("sum") == frozenset({0, 1, 2})
    assert index.postings("two") == frozenset({0, 1})
    assert index.postings("medium") == frozenset({1, 2})


def test_identifier_is_indexed_verbatim(make_problem):
    index = InvertedIndex.build([make_problem("Anything", frontend_id="LC-1A")])

    assert "LC-1A" in index
    assert "lc" not in index
    assert "lc-1a" not in index


def test_difficulty_is_a_single_lowercased_token(make_problem):
    index = InvertedIndex.build([make_problem("Trapping Rain Water", difficulty="Hard")])

    assert "hard" in index
    assert "Hard" not in index


def test_every_key_maps_to_non_empty_set(sample_problems):
    index = InvertedIndex.build(sample_problems)

    assert all(positions for _term, positions in index.items())


def test_empty_collection_builds_empty_index():
    index = InvertedIndex.build([])

    assert len(index) == 0
    assert list(index.terms()) == []
    assert index.postings("anything") == frozenset()


def test_index_is_read_only(sample_problems):
    index = InvertedIndex.build(sample_problems)

    with pytest.raises(TypeError):
        index._postings["new"] = frozenset({0})  # type: ignore[index]
