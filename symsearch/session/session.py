"""Search session: ties ranking, windowing and the selection cursor together.

One session is created per search input. All work for an input event runs
synchronously inside input() or key(); the corpus is never mutated, so any
number of sessions can share one corpus.
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from symsearch.data_ingestion.corpus import Corpus
from symsearch.query import (
    EMPTY_WINDOW,
    GLOBAL_RESULTS_LIMIT,
    INLINE_RESULTS_LIMIT,
    EntityFilter,
    ResultWindow,
    inline_filter,
    rank,
    window,
)
from symsearch.session.cursor import SelectionCursor
from symsearch.session.keys import KeyCommand, parse_key
from symsearch.session.render import RenderFrame, RenderSink, SearchStats, frame_items

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyOutcome:
    """Result of dispatching a key to a session."""

    handled: bool
    command: Optional[KeyCommand] = None
    target: Optional[str] = None  # navigation link produced by Activate


UNHANDLED = KeyOutcome(handled=False)


class SearchSession:
    """State for one search widget: last query, displayed results and cursor.

    Args:
        corpus: Entities to search (read only)
        sink: Called with a RenderFrame after every visible change
        limit: Maximum displayed results in list mode
        inline_names: Entity names listed on the page; enables inline
            filtering, which reorders the page instead of drawing a list
        filters: EntityFilter objects applied before matching
        initial_query: Query to run immediately (e.g. from a ?q= parameter)
    """

    def __init__(
        self,
        corpus: Corpus,
        sink: Optional[RenderSink] = None,
        limit: Optional[int] = GLOBAL_RESULTS_LIMIT,
        inline_names: Optional[Iterable[str]] = None,
        filters: Optional[List[EntityFilter]] = None,
        initial_query: Optional[str] = None,
    ):
        self.corpus = corpus
        self.sink = sink
        self.limit = limit
        self.inline_names = list(inline_names) if inline_names is not None else None
        self.filters = filters
        self.cursor = SelectionCursor()
        self.last_query = ""
        self.results: ResultWindow = EMPTY_WINDOW
        self.frame = RenderFrame()

        if initial_query:
            self.input(initial_query)

    @property
    def inline_mode(self) -> bool:
        return self.inline_names is not None

    @property
    def cursor_index(self) -> int:
        return self.cursor.index

    def input(self, text: str) -> bool:
        """Process new query text.

        Returns:
            True if the query changed and results were recomputed
        """
        query = (text or "").strip()
        if query == self.last_query:
            return False
        self.last_query = query

        if not query:
            self.clear()
            return True

        start = time.perf_counter()
        ranked = rank(self.corpus.entities, query, self.filters)

        if not ranked:
            logger.debug(f"No results for {query!r}")
            self.clear()
            return True

        inline = None
        if self.inline_mode:
            inline = inline_filter(ranked, self.inline_names)
            self.results = window(ranked, INLINE_RESULTS_LIMIT)
            self.cursor.reset(0)
            items = ()
        else:
            self.results = window(ranked, self.limit)
            self.cursor.reset(len(self.results))
            items = frame_items(self.results, self.corpus.package_paths, self.corpus.scope)

        duration_ms = (time.perf_counter() - start) * 1000
        stats = SearchStats(
            results_found=self.results.results_found,
            results_shown=self.results.results_shown,
            corpus_size=len(self.corpus),
            duration_ms=duration_ms,
        )
        logger.debug(f"{query!r}: {stats.summary()}")

        self._emit(RenderFrame(items=items, cursor_index=self.cursor.index, stats=stats, inline=inline))
        return True

    def clear(self) -> None:
        """Drop displayed results and the selection."""
        self.results = EMPTY_WINDOW
        self.cursor.reset(0)
        self._emit(RenderFrame())

    def move(self, direction: int) -> int:
        """Move the selection and repaint."""
        index = self.cursor.move(direction)
        self._redraw()
        return index

    def cancel(self) -> None:
        """Drop the selection, keep the results."""
        self.cursor.cancel()
        self._redraw()

    def activate(self) -> Optional[str]:
        """Return the selected entity's link and clear the results.

        Returns None, leaving everything as it was, when nothing is selected.
        """
        if not self.cursor.has_selection:
            return None
        target = self.results[self.cursor.index].entity.link
        if not target:
            return None
        logger.debug(f"Activated {target}")
        self.clear()
        return target

    def key(self, name: str) -> KeyOutcome:
        """Dispatch a composed key name (see keys.key_string)."""
        command = parse_key(name)
        if command is None:
            return UNHANDLED

        if command is KeyCommand.ACTIVATE:
            return KeyOutcome(handled=True, command=command, target=self.activate())
        if command is KeyCommand.CANCEL:
            self.cancel()
        elif command is KeyCommand.MOVE_UP:
            self.move(-1)
        elif command is KeyCommand.MOVE_DOWN:
            self.move(+1)
        return KeyOutcome(handled=True, command=command)

    def selected(self):
        """The selected RankedEntity, or None."""
        if not self.cursor.has_selection:
            return None
        return self.results[self.cursor.index]

    def _redraw(self) -> None:
        self._emit(RenderFrame(
            items=self.frame.items,
            cursor_index=self.cursor.index,
            stats=self.frame.stats,
            inline=self.frame.inline,
        ))

    def _emit(self, frame: RenderFrame) -> None:
        self.frame = frame
        if self.sink is not None:
            self.sink(frame)
