"""Inline filtering of a package page's own entity listing.

Instead of drawing a result list, the page hides entities that do not match
and orders the rest by score. Scoring is the ranker's; only the output
differs.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence

from symsearch.models import RankedEntity


@dataclass
class InlineFilterResult:
    """Display order per page entity name; None means hidden."""

    orders: Dict[str, Optional[int]] = field(default_factory=dict)
    results: Dict[str, RankedEntity] = field(default_factory=dict)

    @property
    def any_visible(self) -> bool:
        return any(order is not None for order in self.orders.values())

    def visible_names(self) -> list:
        """Visible names sorted by display order (best first)."""
        visible = [(order, name) for name, order in self.orders.items() if order is not None]
        return [name for _, name in sorted(visible, key=lambda item: item[0])]


def inline_filter(ranked: Sequence[RankedEntity], page_names: Iterable[str]) -> InlineFilterResult:
    """Map ranked results onto the entities listed on a page.

    Args:
        ranked: Ranked results, best first (no window limit applied)
        page_names: Names of the entities rendered on the page

    Returns:
        InlineFilterResult with order -score for matching names
    """
    best: Dict[str, RankedEntity] = {}
    for result in ranked:
        # ranked is best first, so the first hit per name wins
        best.setdefault(result.entity.name, result)

    outcome = InlineFilterResult()
    for name in page_names:
        result = best.get(name)
        if result is None:
            outcome.orders[name] = None
        else:
            outcome.orders[name] = -result.score
            outcome.results[name] = result
    return outcome
