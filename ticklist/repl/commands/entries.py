"""
FILE: ticklist/repl/commands/entries.py
PURPOSE: Entry command handlers for REPL (add, ls, toggle, all, rm, edit)
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_entry, display_state
from ..style import celebrate_add, celebrate_done, celebrate_delete, celebrate_all_done
from ...core.commands import Add, Edit, Focus, Remove, SetFilter, Toggle, ToggleAll, ToggleEdit
from ...core.exceptions import InvalidInputError
from ...core.models import Filter
from ...core.service import parse_entry_number


def _entry_index(result: ParseResult, usage: str):
    """
    Resolve the first argument to an entry index, printing errors.

    Returns:
        Zero-based index, or None if the argument is missing or invalid
    """
    if not result.args:
        console.print("[red]Error:[/red] Entry number required")
        console.print(f"[dim]Usage: {usage}[/dim]")
        return None

    try:
        return parse_entry_number(result.args[0], repl_context.state)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return None


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - append a new entry.

    Usage:
        add Buy groceries
        add "Entry with  spacing"
        add fix the --verbose flag  (text is kept as typed)
    """
    text = result.rest()
    if not text:
        console.print("[red]Error:[/red] Entry text required")
        console.print("[dim]Usage: add <text>[/dim]")
        return

    service = repl_context.service
    before = len(service.state)
    service.dispatch(Add(text))

    if len(service.state) == before:
        console.print("[dim]Nothing added (empty text)[/dim]")
        return

    idx = len(service.state) - 1
    console.print(f"[green]{celebrate_add()}[/green]")
    display_entry(idx, service.state.entries[idx], "✓ Added:", console)


def handle_ls_command(result: ParseResult) -> None:
    """
    Handle 'ls' command - show entries under the current filter.

    Usage:
        ls
        ls --filter active     (switches the filter, then lists)
    """
    filter_name = result.flags.get("filter")
    if filter_name:
        if filter_name is True:
            console.print("[red]Error:[/red] --filter needs a value (all, active, completed)")
            return
        try:
            new_filter = Filter.parse(filter_name)
        except InvalidInputError as e:
            console.print(f"[red]Error:[/red] {e}")
            return
        # Rendering happens in the service subscriber
        repl_context.service.dispatch(SetFilter(new_filter))
        return

    display_state(repl_context.state, console)


def handle_toggle_command(result: ParseResult) -> None:
    """
    Handle 'toggle' / 'done' command - flip an entry between done and todo.

    Usage:
        toggle 2
        done 2
    """
    idx = _entry_index(result, "toggle <number>")
    if idx is None:
        return

    service = repl_context.service
    service.dispatch(Toggle(idx))

    entry = service.state.entries[idx]
    if entry.completed:
        console.print(f"[green]{celebrate_done()}[/green]")
        display_entry(idx, entry, "✓ Completed:", console)
    else:
        display_entry(idx, entry, "○ Reopened:", console)


def handle_all_command(result: ParseResult) -> None:
    """
    Handle 'all' command - mark every entry done, or all undone if they already are.

    Usage:
        all
    """
    service = repl_context.service
    if service.state.is_empty():
        console.print("[dim]No entries to toggle[/dim]")
        return

    service.dispatch(ToggleAll())

    if service.state.is_all_completed():
        console.print(f"[green]{celebrate_all_done()} Marked {len(service.state)} entries done[/green]")
    else:
        console.print(f"[yellow]Marked {len(service.state)} entries not done[/yellow]")


def handle_rm_command(result: ParseResult) -> None:
    """
    Handle 'rm' command - remove an entry.

    Usage:
        rm 3

    Notes:
        Later entries move up one number.
    """
    idx = _entry_index(result, "rm <number>")
    if idx is None:
        return

    service = repl_context.service
    entry = service.state.entries[idx]
    service.dispatch(Remove(idx))

    console.print(f"[green]{celebrate_delete()}[/green] Removed: {entry.description}")


def handle_edit_command(result: ParseResult) -> None:
    """
    Handle 'edit' command - change an entry's text.

    Usage:
        edit 2                  (prompt pre-filled with the current text)
        edit 2 New text         (apply directly)

    Notes:
        Submitting empty text leaves the entry with an empty description.
        Without a terminal the prompt is not pre-filled; an empty line
        keeps the current text.
    """
    idx = _entry_index(result, "edit <number> [text]")
    if idx is None:
        return

    service = repl_context.service
    service.dispatch(ToggleEdit(idx))

    new_text = result.rest(1)
    if not new_text:
        service.dispatch(Focus())
        new_text = repl_context.read_edit(idx, service.state.edit_value)

    service.dispatch(Edit(idx, new_text))

    entry = service.state.entries[idx]
    if not entry.description:
        console.print(f"[yellow]Warning:[/yellow] Entry #{idx + 1} now has no text")
    else:
        display_entry(idx, entry, "✓ Updated:", console)
