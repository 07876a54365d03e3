"""Fuzzy subsequence matching for symbol names."""

from symsearch.matching.matcher import (
    match,
    scan_match,
    substring_match,
    ADJACENCY_BONUS,
    SEPARATOR_BONUS,
    CAMEL_BONUS,
    LEADING_LETTER_PENALTY,
    MAX_LEADING_LETTER_PENALTY,
    UNMATCHED_LETTER_PENALTY,
    SUBSTRING_BONUS,
)
from symsearch.matching.highlight import highlight, split_positions

__all__ = [
    "match",
    "scan_match",
    "substring_match",
    "highlight",
    "split_positions",
    "ADJACENCY_BONUS",
    "SEPARATOR_BONUS",
    "CAMEL_BONUS",
    "LEADING_LETTER_PENALTY",
    "MAX_LEADING_LETTER_PENALTY",
    "UNMATCHED_LETTER_PENALTY",
    "SUBSTRING_BONUS",
]
