"""Ranking and windowing of fuzzy symbol matches."""

from symsearch.query.ranker import rank, score_entity
from symsearch.query.window import (
    ResultWindow,
    window,
    EMPTY_WINDOW,
    GLOBAL_RESULTS_LIMIT,
    INLINE_RESULTS_LIMIT,
)
from symsearch.query.inline import InlineFilterResult, inline_filter
from symsearch.query.filters import EntityFilter, KindFilter, QualifierFilter
from symsearch.query.exceptions import QueryError, FilterError

__all__ = [
    "rank",
    "score_entity",
    "ResultWindow",
    "window",
    "EMPTY_WINDOW",
    "GLOBAL_RESULTS_LIMIT",
    "INLINE_RESULTS_LIMIT",
    "InlineFilterResult",
    "inline_filter",
    "EntityFilter",
    "KindFilter",
    "QualifierFilter",
    "QueryError",
    "FilterError",
]
