"""Output formatting utilities for CLI with Rich integration."""

import json
from io import StringIO
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from symsearch.models import RankedEntity
from symsearch.session.render import RenderFrame

MATCH_STYLE = "bold yellow"
SELECTED_STYLE = "reverse"


def highlight_text(text: str, positions: Sequence[int], style: str = MATCH_STYLE) -> Text:
    """Build a rich Text with the matched positions styled.

    Args:
        text: Candidate string
        positions: Matched indices into text
        style: Rich style applied to each matched character

    Returns:
        Styled Text
    """
    rich_text = Text(text)
    for pos in positions:
        if 0 <= pos < len(text):
            rich_text.stylize(style, pos, pos + 1)
    return rich_text


def _render(renderable, width: int = 120) -> str:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, width=width)
    console.print(renderable)
    return buffer.getvalue().rstrip()


def format_results_json(results: List[RankedEntity]) -> str:
    """Format ranked results as JSON.

    Args:
        results: Ranked results

    Returns:
        JSON string representation
    """
    data = [
        {
            "name": r.entity.name,
            "qualifier": r.entity.qualifier,
            "full": r.entity.full,
            "kind": r.entity.kind_tag(),
            "link": r.entity.link,
            "score": r.score,
            "matched_positions": list(r.matched_positions),
            "highlighted": r.highlighted,
        }
        for r in results
    ]
    return json.dumps(data, indent=2)


def format_results_table(
    results: List[RankedEntity],
    selected: int = -1,
    title: str = "Search Results",
) -> str:
    """Format ranked results as a rich table.

    Args:
        results: Ranked results
        selected: Index of the highlighted row, -1 for none
        title: Table title

    Returns:
        Formatted table string
    """
    if not results:
        return "No results found"

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Symbol", style="cyan", width=40)
    table.add_column("Kind", style="green", width=24)
    table.add_column("Score", style="red", width=8)

    for i, r in enumerate(results):
        table.add_row(
            str(i + 1),
            highlight_text(r.entity.full, r.matched_positions),
            r.entity.kind_tag(),
            str(r.score),
            style=SELECTED_STYLE if i == selected else None,
        )

    return _render(table)


def format_results(results: List[RankedEntity], format: str = "table") -> str:
    """Format results in the specified format ('table' or 'json')."""
    if format == "json":
        return format_results_json(results)
    else:
        return format_results_table(results)


def format_frame(frame: RenderFrame, results: Optional[List[RankedEntity]] = None) -> str:
    """Format a session frame: the result list with the cursor row marked."""
    if frame.inline is not None:
        names = frame.inline.visible_names()
        if not names:
            return "No results found"
        return "\n".join(f"  {name}" for name in names)

    if not frame.items:
        return "No results found"

    if results is not None:
        text = format_results_table(results, selected=frame.cursor_index)
    else:
        lines = []
        for i, item in enumerate(frame.items):
            marker = "➜" if i == frame.cursor_index else " "
            if item.qualifier_label is not None:
                label = f"{item.qualifier_label}.{item.name_label}"
            else:
                label = item.name_label
            lines.append(f"{marker} {i + 1:>3}. {label}  ({item.kind_tag})")
        text = "\n".join(lines)

    if frame.stats is not None:
        text += f"\n{frame.stats.summary()}"
    return text
