"""Highlight markup for matched character positions."""

from typing import Iterable, List, Sequence, Tuple

OPEN_TAG = "<b>"
CLOSE_TAG = "</b>"


def _runs(positions: Sequence[int]) -> List[Tuple[int, int]]:
    """Group sorted positions into (start, end) runs of consecutive indices."""
    runs: List[Tuple[int, int]] = []
    for pos in positions:
        if runs and runs[-1][1] == pos:
            runs[-1] = (runs[-1][0], pos + 1)
        else:
            runs.append((pos, pos + 1))
    return runs


def highlight(
    text: str,
    positions: Iterable[int],
    merge: bool = False,
    open_tag: str = OPEN_TAG,
    close_tag: str = CLOSE_TAG,
) -> str:
    """Wrap matched positions of text in highlight markers.

    Args:
        text: Candidate string
        positions: Strictly increasing indices into text
        merge: Wrap runs of consecutive positions in a single span instead
            of one span per character (used for substring hits)
        open_tag: Opening marker
        close_tag: Closing marker

    Returns:
        Text with markers inserted, in ascending index order
    """
    positions = [p for p in positions if 0 <= p < len(text)]
    if merge:
        spans = _runs(positions)
    else:
        spans = [(p, p + 1) for p in positions]

    parts = []
    last = 0
    for start, end in spans:
        parts.append(text[last:start])
        parts.append(open_tag)
        parts.append(text[start:end])
        parts.append(close_tag)
        last = end
    parts.append(text[last:])
    return "".join(parts)


def split_positions(
    positions: Sequence[int], boundary: int
) -> Tuple[List[int], List[int]]:
    """Split positions around a separator index.

    Positions before the boundary are returned as-is; positions after it are
    shifted to be relative to the text following the separator. A position
    on the boundary itself is dropped.
    """
    head = [p for p in positions if p < boundary]
    tail = [p - boundary - 1 for p in positions if p > boundary]
    return head, tail
