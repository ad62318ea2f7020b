"""Output formatting utilities for CLI with Rich integration."""

import json
from io import StringIO
from typing import List

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jasssearch.models import ApiEntry
from jasssearch.query.models import SearchResult
from jasssearch.rendering import DetailPayload
from jasssearch.session import DisplayRow


def _render(renderable) -> str:
    """Render a Rich renderable to a string."""
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, width=120)
    console.print(renderable)
    return buffer.getvalue().rstrip()


def build_rows_table(rows: List[DisplayRow], title: str = "JASS API") -> Table:
    """Build a numbered table of display rows.

    Placeholder rows are shown without a number since they cannot be selected.
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Signature", style="green")
    table.add_column("Summary", style="white")

    number = 0
    for row in rows:
        if row.placeholder:
            table.add_row("", Text(row.label, style="yellow"), Text(row.description), "")
            continue
        number += 1
        table.add_row(str(number), Text(row.label), Text(row.description), Text(row.detail))
    return table


def format_rows_table(rows: List[DisplayRow], title: str = "JASS API") -> str:
    """Format display rows as a rich ASCII table.

    Args:
        rows: Rows to show

    Returns:
        Formatted table string
    """
    if not rows:
        return "No results found"
    return _render(build_rows_table(rows, title=title))


def format_results_json(results: List[SearchResult]) -> str:
    """Format ranked results as JSON.

    Args:
        results: List of search results

    Returns:
        JSON string representation
    """
    data = [
        {
            "name": r.entry.name,
            "signature": r.entry.signature,
            "score": round(r.score, 4),
            "matched_key": r.matched_key,
            "description": r.entry.description,
        }
        for r in results
    ]
    return json.dumps(data, indent=2)


def format_entries_json(entries: List[ApiEntry]) -> str:
    """Format unranked entries as JSON."""
    data = [
        {
            "name": entry.name,
            "signature": entry.signature,
            "parameters": entry.parameters,
            "return_type": entry.return_type,
            "description": entry.description,
        }
        for entry in entries
    ]
    return json.dumps(data, indent=2)


def build_detail_panel(payload: DetailPayload) -> Panel:
    """Build a panel from a payload rendered with RICH_STYLE."""
    body = Group(
        Text.from_markup(payload.signature),
        Text(""),
        Text.from_markup(payload.description),
    )
    return Panel(body, title=Text.from_markup(payload.title), border_style="blue")
