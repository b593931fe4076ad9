"""
FILE: ticklist/repl/main.py
PURPOSE: Interactive REPL for the entry list with prompt-toolkit
EXPORTS:
  - main() - Entry point for REPL mode
  - run_repl() - Main REPL loop
  - REPLContext / repl_context - Session state (service, prompt session)
  - execute_command() - Dispatch a parsed command to its handler
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - ticklist.core.service (TodoService)
  - ticklist.repl.parser (command parsing)
  - ticklist.repl.completer (autocomplete)
NOTES:
  - Command history is in-memory only
  - Prompt shows the current filter; bottom toolbar shows counts
  - Falls back to plain input() when stdin/stdout is not a TTY
  - The list is re-rendered after each state change via a service subscriber
  - A PersistenceError ends the session with exit status 1
  - Ctrl+D or "exit"/"quit" to exit
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console
from rich.markup import escape

from ..core.commands import Command, Focus, ToggleEdit
from ..core.exceptions import PersistenceError
from ..core.models import Filter
from ..core.service import TodoService, open_service
from ..core.state import State
from .parser import parse_command, ParseResult
from .completer import create_completer
from .display import display_state

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()


# --- REPL Context (Session State) ---


@dataclass
class REPLContext:
    """
    Session state shared by the REPL command handlers.

    Attributes:
        service: The TodoService for this session (None before run_repl)
        session: prompt_toolkit session, None in simple input mode
    """
    service: Optional[TodoService] = None
    session: Optional[PromptSession] = None

    @property
    def state(self) -> Optional[State]:
        return self.service.state if self.service else None

    def get_prompt(self) -> str:
        """
        Generate plain prompt string based on current filter.

        Returns:
            "ticklist> " or "ticklist:[active]> "
        """
        state = self.state
        if state is None or state.filter is Filter.ALL:
            return "ticklist> "
        return f"ticklist:[{state.filter.value}]> "

    def read_edit(self, idx: int, current: str) -> str:
        """
        Ask for the new text of entry idx, pre-filled with the current text.

        Ctrl+C or Ctrl+D keeps the current text, like leaving the field.
        Without a session the current text is shown above the prompt and an
        empty line keeps it.
        """
        label = f"edit #{idx + 1}> "
        try:
            if self.session is not None:
                return self.session.prompt(HTML(f"<b>{label}</b>"), default=current)

            console.print(f"[dim]Current: {escape(current)} (Enter keeps it)[/dim]")
            typed = input(label)
            return typed if typed.strip() else current
        except (KeyboardInterrupt, EOFError):
            return current


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def format_prompt() -> HTML:
    """
    Create formatted prompt text with the active filter highlighted.
    """
    state = repl_context.state
    if state is None or state.filter is Filter.ALL:
        return HTML("<b>ticklist&gt; </b>")

    filter_colors = {
        Filter.ACTIVE: "ansiyellow",
        Filter.COMPLETED: "ansigreen",
    }
    color = filter_colors.get(state.filter, "white")
    return HTML(f"<b>ticklist:[<{color}>{state.filter.value}</{color}>]&gt; </b>")


def get_bottom_toolbar() -> HTML:
    """Toolbar with remaining/done counts."""
    state = repl_context.state
    if state is None:
        return HTML("<style bg='#444444' fg='#ffffff'> ticklist </style>")

    stats = f"{state.total()} item(s) left | {state.completed_count()} done | {len(state)} total"
    return HTML(f"<style bg='#444444' fg='#ffffff'> {stats} | 'help' for commands </style>")


def get_right_prompt() -> HTML:
    """Right prompt with the number of entries in the current view."""
    state = repl_context.state
    if state is None:
        return HTML("")
    return HTML(f"<style fg='#888888'>[{len(state.visible())} in view]</style>")


def render_after_change(state: State, command: Command) -> None:
    """Service subscriber: re-render the list after each state change."""
    # The edit prompt takes the place of the list while editing
    if isinstance(command, (Focus, ToggleEdit)):
        return
    display_state(state, console)


# Import command handlers from command modules
from .commands import (
    handle_add_command,
    handle_ls_command,
    handle_toggle_command,
    handle_all_command,
    handle_rm_command,
    handle_edit_command,
    handle_filter_command,
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handlers = {
        "add": handle_add_command,
        "ls": handle_ls_command,
        "toggle": handle_toggle_command,
        "done": handle_toggle_command,
        "all": handle_all_command,
        "rm": handle_rm_command,
        "edit": handle_edit_command,
        "filter": handle_filter_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        handler(result)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(service: Optional[TodoService] = None) -> None:
    """
    Main REPL loop.

    Args:
        service: Session service; defaults to the on-disk store

    Raises:
        PersistenceError: If saving fails (fatal for the session)
    """
    repl_context.service = service or open_service()
    unsubscribe = repl_context.service.subscribe(render_after_change)

    has_tty = sys.stdin.isatty() and sys.stdout.isatty()
    repl_context.session = None

    if has_tty:
        try:
            repl_context.session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(lambda: repl_context.state),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
                rprompt=get_right_prompt,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")

    console.print("[bold cyan]ticklist REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if repl_context.session is None:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    display_state(repl_context.state, console)
    console.print()

    try:
        while True:
            user_input = ""
            try:
                if repl_context.session is None:
                    user_input = input(repl_context.get_prompt())
                else:
                    user_input = repl_context.session.prompt(format_prompt())

                result = parse_command(user_input)

                if not execute_command(result):
                    break

            except KeyboardInterrupt:
                console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
                continue
            except EOFError:
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break
            except PersistenceError as e:
                console.print(f"[red]Fatal:[/red] {e}")
                console.print("[red]Your last change was not saved. Exiting.[/red]")
                raise
            except Exception as e:
                logger.exception("Unexpected error while handling %r", user_input)
                console.print(f"[red]Unexpected error:[/red] {e}")
    finally:
        unsubscribe()


def main(db_path: Optional[str] = None) -> None:
    """
    Entry point for REPL mode.

    Called when user runs: ticklist  or  ticklist repl
    """
    try:
        run_repl(open_service(db_path))
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
