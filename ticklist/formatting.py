"""
FILE: ticklist/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - EntryFormatter: Class for formatting the entry list
  - items_left(count) -> str: Footer text
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - ticklist.core (Entry, Filter, State)
NOTES:
  - Entry numbers shown to users are 1-based positions in the full list,
    so they stay valid whatever filter is active
  - Used by both CLI and REPL
"""

import json
from typing import List, Tuple

from rich.table import Table
from rich.text import Text

from .core.models import Entry, Filter
from .core.state import State


class EntryFormatter:
    """Centralized entry display formatting."""

    @staticmethod
    def create_table(state: State, title: str = "") -> Table:
        """
        Create Rich table of the entries visible under the current filter.

        Args:
            state: State to render
            title: Optional table title

        Returns:
            Rich Table object ready for display
        """
        table = Table(title=title or None, show_header=True, header_style="bold cyan")
        table.add_column("#", style="cyan", width=4, no_wrap=True)
        table.add_column("", width=2, no_wrap=True)
        table.add_column("Entry", style="white")

        for idx, entry in state.visible():
            if entry.completed:
                marker = "[green]✓[/green]"
                description = f"[dim strike]{entry.description}[/dim strike]"
            else:
                marker = "[yellow]○[/yellow]"
                description = entry.description

            if entry.editing:
                description = f"[reverse]{state.edit_value}[/reverse] [dim](editing)[/dim]"

            table.add_row(str(idx + 1), marker, description)

        return table

    @staticmethod
    def filter_bar(current: Filter) -> Text:
        """
        Build the "All | Active | Completed" selector with the current one highlighted.
        """
        text = Text()
        for i, f in enumerate(Filter):
            if i:
                text.append(" | ", style="dim")
            if f is current:
                text.append(f.label, style="bold underline cyan")
            else:
                text.append(f.label, style="dim")
        return text

    @staticmethod
    def to_json_array(entries: List[Tuple[int, Entry]]) -> str:
        """
        Convert (index, entry) pairs to a JSON array string.

        Each object carries its 1-based "number" next to the entry fields.
        """
        data = [
            {"number": idx + 1, **entry.to_dict()}
            for idx, entry in entries
        ]
        return json.dumps(data, indent=2)

    @staticmethod
    def to_raw_lines(entries: List[Tuple[int, Entry]]) -> List[str]:
        """Plain text lines, one per entry: "1: [x] description"."""
        lines = []
        for idx, entry in entries:
            status_marker = "x" if entry.completed else " "
            lines.append(f"{idx + 1}: [{status_marker}] {entry.description}")
        return lines


def items_left(count: int) -> str:
    """
    Footer text for the number of unfinished entries.

    Example:
        items_left(2) -> "2 item(s) left"
    """
    return f"{count} item(s) left"
