"""Single-pass fuzzy subsequence matcher.

Scores how well a short query matches a candidate symbol name. A contiguous
case-sensitive hit short-circuits with a large bonus; otherwise the candidate
is scanned once, left to right, keeping the best-scoring position for the
next query letter until a later query letter forces it to be committed.
"""

import logging
from typing import List, Optional

from symsearch.models import MatchResult, NO_MATCH

logger = logging.getLogger(__name__)

# Score constants
ADJACENCY_BONUS = 5               # previous candidate letter was matched too
SEPARATOR_BONUS = 10              # match follows '_', ' ' or '.'
CAMEL_BONUS = 10                  # upper-case match right after a lower-case letter
LEADING_LETTER_PENALTY = -3       # per candidate letter before the first match
MAX_LEADING_LETTER_PENALTY = -9   # clamp for the leading-letter penalty
UNMATCHED_LETTER_PENALTY = -1     # per candidate letter not used by the match
SUBSTRING_BONUS = 50              # per query letter for a contiguous hit

SEPARATORS = frozenset("_ .")


def _is_lower(ch: str) -> bool:
    # Letters only: digits and punctuation are neither upper nor lower
    return ch == ch.lower() and ch.lower() != ch.upper()


def _is_upper(ch: str) -> bool:
    return ch == ch.upper() and ch.lower() != ch.upper()


def substring_match(candidate: str, query: str) -> Optional[MatchResult]:
    """Return the contiguous-substring match, or None if query is not a substring.

    The check is case-sensitive: only a literal hit earns the bonus.
    """
    start = candidate.find(query)
    if start < 0:
        return None

    score = len(query) * SUBSTRING_BONUS
    if len(candidate) == len(query):
        score *= 2

    return MatchResult(
        matched=True,
        score=score,
        matched_positions=tuple(range(start, start + len(query))),
        substring=True,
    )


def scan_match(candidate: str, query: str) -> MatchResult:
    """Score query as a case-insensitive subsequence of candidate.

    Args:
        candidate: String being searched (e.g. "fmt.printf")
        query: Abbreviated query (e.g. "fpf")

    Returns:
        MatchResult; matched is False when the candidate runs out before
        every query letter was consumed.
    """
    score = 0
    query_idx = 0
    query_len = len(query)
    prev_matched = False
    prev_lower = False
    prev_separator = True  # so a match on the first letter gets the separator bonus

    # Best candidate position seen so far for the most recent query letter
    best_idx: Optional[int] = None
    best_lower: Optional[str] = None
    best_score = 0

    positions: List[int] = []

    for idx, ch in enumerate(candidate):
        query_lower = query[query_idx].lower() if query_idx < query_len else None
        ch_lower = ch.lower()

        next_match = query_lower is not None and query_lower == ch_lower
        rematch = best_idx is not None and best_lower == ch_lower

        advanced = next_match and best_idx is not None
        query_repeat = best_idx is not None and query_lower is not None and best_lower == query_lower
        if advanced or query_repeat:
            score += best_score
            positions.append(best_idx)
            best_idx = None
            best_lower = None
            best_score = 0

        if next_match or rematch:
            new_score = 0

            if query_idx == 0:
                score += max(idx * LEADING_LETTER_PENALTY, MAX_LEADING_LETTER_PENALTY)

            if prev_matched:
                new_score += ADJACENCY_BONUS
            if prev_separator:
                new_score += SEPARATOR_BONUS
            if prev_lower and _is_upper(ch):
                new_score += CAMEL_BONUS

            if next_match:
                query_idx += 1

            # Later letters win ties so a match after a boundary is preferred
            if new_score >= best_score:
                if best_idx is not None:
                    score += UNMATCHED_LETTER_PENALTY

                best_idx = idx
                best_lower = ch_lower
                best_score = new_score

            prev_matched = True
        else:
            score += UNMATCHED_LETTER_PENALTY
            prev_matched = False

        prev_lower = _is_lower(ch)
        prev_separator = ch in SEPARATORS

    if best_idx is not None:
        score += best_score
        positions.append(best_idx)

    if query_idx != query_len:
        return MatchResult(matched=False, score=score, matched_positions=tuple(positions))

    return MatchResult(matched=True, score=score, matched_positions=tuple(positions))


def match(candidate: str, query: str) -> MatchResult:
    """Match query against candidate.

    An empty query matches anything with score 0 and no highlighted
    positions; an empty candidate never matches a non-empty query.
    """
    if not query:
        return MatchResult(matched=True)
    if not candidate:
        return NO_MATCH

    hit = substring_match(candidate, query)
    if hit is not None:
        return hit
    return scan_match(candidate, query)
