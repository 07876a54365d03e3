"""Tests for the result window."""

import pytest

from symsearch.query import QueryError, rank, window


def test_window_truncates_in_order(corpus):
    """Test window keeps the first limit results unchanged."""
    ranked = rank(corpus.entities, "t")
    result = window(ranked, 2)

    assert result.items == ranked[:2]
    assert result.results_found == len(ranked)
    assert result.results_shown == 2


def test_window_without_limit(corpus):
    """Test a None limit keeps everything."""
    ranked = rank(corpus.entities, "t")
    result = window(ranked, None)

    assert len(result) == len(ranked)
    assert result.results_shown == result.results_found


def test_window_larger_than_results(corpus):
    """Test a limit above the result count keeps all results."""
    ranked = rank(corpus.entities, "printf")
    result = window(ranked, 64)

    assert len(result) == len(ranked)


def test_window_zero_limit(corpus):
    """Test a zero limit shows nothing but still counts what was found."""
    ranked = rank(corpus.entities, "t")
    result = window(ranked, 0)

    assert len(result) == 0
    assert result.results_found == len(ranked)


def test_window_negative_limit():
    """Test a negative limit is rejected."""
    with pytest.raises(QueryError):
        window([], -1)


def test_window_is_indexable(corpus):
    """Test the window supports indexing and iteration."""
    ranked = rank(corpus.entities, "print")
    result = window(ranked, 32)

    assert result[0] is ranked[0]
    assert list(result) == ranked
