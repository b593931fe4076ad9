"""
FILE: ticklist/repl/display.py
PURPOSE: Render the entry list view in the REPL
EXPORTS:
  - display_state() - Show the filtered list, footer and filter selector
  - display_entry() - Show a single entry with a message
DEPENDENCIES:
  - rich (formatted output)
  - ticklist.formatting (EntryFormatter)
NOTES:
  - Takes the console as a parameter to avoid circular imports with main
  - An empty list shows a hint instead of the list and footer
"""

from typing import Optional

from rich.console import Console

from ..core.models import Entry
from ..core.state import State
from ..formatting import EntryFormatter, items_left

console = Console()


def display_entry(idx: int, entry: Entry, message: str = "", console_instance: Optional[Console] = None) -> None:
    """
    Display a single entry with optional message.

    Args:
        idx: Zero-based index of the entry
        entry: Entry to display
        message: Optional message shown before the entry (e.g. "✓ Added:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    status = "done" if entry.completed else "todo"
    console_instance.print(f"  [cyan]#{idx + 1}[/cyan]: {entry.description} [dim]({status})[/dim]")


def display_state(state: State, console_instance: Optional[Console] = None) -> None:
    """
    Display the entries visible under the current filter.

    Shows the "N item(s) left" footer and the filter selector below the table.
    """
    if console_instance is None:
        console_instance = console

    if state.is_empty():
        console_instance.print("[dim]Nothing to do yet. Try: add <text>[/dim]")
        return

    if state.visible():
        console_instance.print(EntryFormatter.create_table(state))
    else:
        console_instance.print(f"[dim]No {state.filter.value} entries[/dim]")

    all_marker = "[green]✓[/green]" if state.is_all_completed() else "[dim]○[/dim]"
    console_instance.print(f"{all_marker} [bold]{items_left(state.total())}[/bold]")
    console_instance.print(EntryFormatter.filter_bar(state.filter))
