"""Interactive search state: query input, selection cursor and key handling."""

from symsearch.session.cursor import NO_SELECTION, SelectionCursor
from symsearch.session.keys import KeyCommand, is_focus_shortcut, key_string, parse_key
from symsearch.session.render import RenderFrame, RenderItem, SearchStats, make_render_item
from symsearch.session.session import KeyOutcome, SearchSession

__all__ = [
    "NO_SELECTION",
    "SelectionCursor",
    "KeyCommand",
    "is_focus_shortcut",
    "key_string",
    "parse_key",
    "RenderFrame",
    "RenderItem",
    "SearchStats",
    "make_render_item",
    "KeyOutcome",
    "SearchSession",
]
