"""
FILE: ticklist/repl/commands/system.py
PURPOSE: View and system command handlers for REPL (filter, help, clear)
"""

from rich.panel import Panel

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.commands import SetFilter
from ...core.exceptions import InvalidInputError
from ...core.models import Filter
from ...formatting import EntryFormatter


def handle_filter_command(result: ParseResult) -> None:
    """
    Handle 'filter' command - choose which entries the list shows.

    Usage:
        filter              # Show current filter
        filter active       # Only entries not done
        filter completed    # Only done entries
        filter all          # Everything
    """
    state = repl_context.state

    if not result.args:
        console.print("Current filter: ", EntryFormatter.filter_bar(state.filter))
        return

    try:
        new_filter = Filter.parse(result.args[0])
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    repl_context.service.dispatch(SetFilter(new_filter))
    console.print(f"✓ Showing [cyan]{new_filter.value}[/cyan] entries")


def handle_help_command(result: ParseResult) -> None:
    """Handle 'help' command - show available commands."""
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]add <text>[/cyan]                Add an entry
  [cyan]ls [--filter <name>][/cyan]      List entries (current filter)
  [cyan]toggle <n>[/cyan] / [cyan]done <n>[/cyan]   Toggle entry n done/undone
  [cyan]all[/cyan]                       Mark all done (all undone if already done)
  [cyan]rm <n>[/cyan]                    Remove entry n
  [cyan]edit <n> [text][/cyan]           Edit entry n (prompts with current text)
  [cyan]filter [all|active|completed][/cyan]  Choose what the list shows
  [cyan]help[/cyan]                      Show this help
  [cyan]clear[/cyan]                     Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]             Exit REPL

[bold cyan]Examples:[/bold cyan]

  [dim]add Buy milk
  add "Call the plumber"
  done 1
  edit 2                      # Edit in place, Enter to save
  edit 2 Call the electrician
  filter active
  all
  rm 1[/dim]

[bold yellow]Numbers:[/bold yellow]
  [dim]Entry numbers are positions in the whole list, so they stay the
  same under any filter. Removing an entry moves later entries up one.[/dim]
"""
    console.print(Panel(help_text, title="ticklist Help", border_style="cyan"))


def handle_clear_command(result: ParseResult) -> None:
    """Clear the screen."""
    console.clear()
    console.print("[dim]Screen cleared[/dim]")
