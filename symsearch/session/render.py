"""Plain data handed to a renderer after every query change or cursor move."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from symsearch.matching import highlight, split_positions
from symsearch.models import QUALIFIER_SEPARATOR, RankedEntity
from symsearch.query.inline import InlineFilterResult


@dataclass(frozen=True)
class RenderItem:
    """One displayed result."""

    highlighted_label: str
    target_link: str
    kind_tag: str
    name_label: str
    qualifier_label: Optional[str] = None  # None when the qualifier is not shown
    qualifier_link: Optional[str] = None
    score: int = 0


@dataclass(frozen=True)
class SearchStats:
    """Advisory counters for one ranking pass."""

    results_found: int = 0
    results_shown: int = 0
    corpus_size: int = 0
    duration_ms: float = 0.0

    def summary(self) -> str:
        return (
            f"Time to search {self.duration_ms:.1f} milliseconds "
            f"(found {self.results_found}/{self.corpus_size}, displaying {self.results_shown})"
        )


@dataclass(frozen=True)
class RenderFrame:
    """Everything a renderer needs to paint the current state."""

    items: Tuple[RenderItem, ...] = ()
    cursor_index: int = -1
    stats: Optional[SearchStats] = None
    inline: Optional[InlineFilterResult] = None

    @property
    def is_empty(self) -> bool:
        return not self.items and (self.inline is None or not self.inline.any_visible)


RenderSink = Callable[[RenderFrame], None]


def make_render_item(
    result: RankedEntity,
    package_paths: Optional[dict] = None,
    scope: Optional[str] = None,
) -> RenderItem:
    """Build a RenderItem, splitting the label into qualifier and name parts.

    The qualifier is omitted for entities of the scoped package.
    """
    entity = result.entity
    package_paths = package_paths or {}

    if not entity.is_qualified:
        return RenderItem(
            highlighted_label=result.highlighted,
            target_link=entity.link,
            kind_tag=entity.kind_tag(),
            name_label=result.highlighted,
            score=result.score,
        )

    boundary = entity.full.index(QUALIFIER_SEPARATOR)
    head, tail = split_positions(result.matched_positions, boundary)
    qualifier_label = highlight(entity.qualifier, head, merge=result.substring)
    name_label = highlight(entity.name, tail, merge=result.substring)

    show_qualifier = scope is None or entity.package != scope
    return RenderItem(
        highlighted_label=result.highlighted,
        target_link=entity.link,
        kind_tag=entity.kind_tag(),
        name_label=name_label,
        qualifier_label=qualifier_label if show_qualifier else None,
        qualifier_link=package_paths.get(entity.package) if show_qualifier else None,
        score=result.score,
    )


def frame_items(results, package_paths=None, scope=None) -> Tuple[RenderItem, ...]:
    return tuple(make_render_item(r, package_paths, scope) for r in results)
