"""
FILE: ticklist/cli/commands/entries.py
PURPOSE: Entry commands (add, ls, toggle, toggle-all, rm, edit)
"""

import typer

from ..main import app, console, error_console, get_service
from ...core.commands import Add, Edit, Remove, Toggle, ToggleAll, ToggleEdit
from ...core.exceptions import TicklistError, InvalidInputError, PersistenceError
from ...core.models import Filter
from ...core.service import parse_entry_number
from ...formatting import EntryFormatter, items_left


def _fail(message: str, prefix: str = "Error") -> None:
    error_console.print(f"[red]{prefix}:[/red] {message}")
    raise typer.Exit(1)


@app.command()
def add(
    text: str = typer.Argument(..., help="Entry text"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Add an entry.

    Example:
        ticklist add "Buy milk"
    """
    try:
        service = get_service()
        before = len(service.state)
        service.dispatch(Add(text))

        if len(service.state) == before:
            _fail("Entry text cannot be empty")

        idx = len(service.state) - 1
        entry = service.state.entries[idx]
        if raw:
            typer.echo(f"{idx + 1}: {entry.description}")
        else:
            console.print(f"[green]✓ Added [bold]#{idx + 1}[/bold]:[/green] {entry.description}")

    except PersistenceError as e:
        _fail(str(e), "Could not save")
    except TicklistError as e:
        _fail(str(e), "Unexpected error")


@app.command()
def ls(
    filter_name: str = typer.Option("all", "--filter", "-f", help="all, active or completed"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List entries.

    Example:
        ticklist ls
        ticklist ls --filter active
        ticklist ls --json
    """
    try:
        view_filter = Filter.parse(filter_name)
        service = get_service()
        state = service.state
        # Viewing does not change the saved list, so no dispatch/save here
        state.set_filter(view_filter)
        visible = state.visible()

        if json_output:
            typer.echo(EntryFormatter.to_json_array(visible))
        elif raw:
            for line in EntryFormatter.to_raw_lines(visible):
                typer.echo(line)
        else:
            if state.is_empty():
                console.print("[dim]No entries yet[/dim]")
                return
            if visible:
                console.print(EntryFormatter.create_table(state))
            else:
                console.print(f"[dim]No {view_filter.value} entries[/dim]")
            console.print(f"\n[bold]{items_left(state.total())}[/bold]")

    except InvalidInputError as e:
        _fail(str(e))
    except TicklistError as e:
        _fail(str(e), "Unexpected error")


@app.command()
def toggle(
    number: str = typer.Argument(..., help="Entry number (as shown by ls)"),
):
    """
    Toggle an entry between done and not done.

    Example:
        ticklist toggle 2
    """
    try:
        service = get_service()
        idx = parse_entry_number(number, service.state)
        service.dispatch(Toggle(idx))

        entry = service.state.entries[idx]
        if entry.completed:
            console.print(f"[green]✓ Completed #{idx + 1}:[/green] {entry.description}")
        else:
            console.print(f"[yellow]○ Reopened #{idx + 1}:[/yellow] {entry.description}")

    except InvalidInputError as e:
        _fail(str(e))
    except PersistenceError as e:
        _fail(str(e), "Could not save")
    except TicklistError as e:
        _fail(str(e), "Unexpected error")


@app.command("toggle-all")
def toggle_all():
    """
    Mark every entry done, or all not done if they already are.

    Example:
        ticklist toggle-all
    """
    try:
        service = get_service()
        service.dispatch(ToggleAll())

        state = service.state
        if state.is_empty():
            console.print("[dim]No entries to toggle[/dim]")
        elif state.is_all_completed():
            console.print(f"[green]✓ Marked {len(state)} entries done[/green]")
        else:
            console.print(f"[yellow]○ Marked {len(state)} entries not done[/yellow]")

    except PersistenceError as e:
        _fail(str(e), "Could not save")
    except TicklistError as e:
        _fail(str(e), "Unexpected error")


@app.command()
def rm(
    number: str = typer.Argument(..., help="Entry number (as shown by ls)"),
):
    """
    Remove an entry. Later entries move up one number.

    Example:
        ticklist rm 3
    """
    try:
        service = get_service()
        idx = parse_entry_number(number, service.state)
        entry = service.state.entries[idx]
        service.dispatch(Remove(idx))

        console.print(f"[green]✓ Removed #{idx + 1}:[/green] {entry.description}")

    except InvalidInputError as e:
        _fail(str(e))
    except PersistenceError as e:
        _fail(str(e), "Could not save")
    except TicklistError as e:
        _fail(str(e), "Unexpected error")


@app.command()
def edit(
    number: str = typer.Argument(..., help="Entry number (as shown by ls)"),
    text: str = typer.Argument(..., help="New entry text"),
):
    """
    Replace an entry's text.

    Example:
        ticklist edit 2 "Call the electrician"
    """
    try:
        service = get_service()
        idx = parse_entry_number(number, service.state)
        service.dispatch(ToggleEdit(idx))
        service.dispatch(Edit(idx, text))

        entry = service.state.entries[idx]
        if not entry.description:
            error_console.print(f"[yellow]Warning:[/yellow] Entry #{idx + 1} now has no text")
        else:
            console.print(f"[green]✓ Updated #{idx + 1}:[/green] {entry.description}")

    except InvalidInputError as e:
        _fail(str(e))
    except PersistenceError as e:
        _fail(str(e), "Could not save")
    except TicklistError as e:
        _fail(str(e), "Unexpected error")
