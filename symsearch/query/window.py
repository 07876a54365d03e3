from dataclasses import dataclass
from typing import List, Optional, Sequence

from symsearch.models import RankedEntity
from symsearch.query.exceptions import QueryError

# Result caps for the two presentation modes
GLOBAL_RESULTS_LIMIT = 32
INLINE_RESULTS_LIMIT = None  # inline filtering reorders the page instead of capping


@dataclass(frozen=True)
class ResultWindow:
    """The displayed slice of a ranked result list."""

    items: List[RankedEntity]
    results_found: int

    @property
    def results_shown(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> RankedEntity:
        return self.items[index]

    def __iter__(self):
        return iter(self.items)


EMPTY_WINDOW = ResultWindow(items=[], results_found=0)


def window(ranked: Sequence[RankedEntity], limit: Optional[int]) -> ResultWindow:
    """Truncate ranked results to at most limit entries, keeping order.

    Args:
        ranked: Ranked results, best first
        limit: Maximum entries to keep, or None for no cap

    Raises:
        QueryError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise QueryError(f"Result limit must be non-negative, got {limit}")

    items = list(ranked) if limit is None else list(ranked[:limit])
    return ResultWindow(items=items, results_found=len(ranked))
