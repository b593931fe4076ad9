"""
FILE: ticklist/cli/main.py
PURPOSE: Typer-based CLI for one-shot list commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - get_service() - TodoService for the selected database
  - configure_logging(verbose) - Route log records through rich
  - version(), repl() - System commands
  - add(), ls(), toggle(), toggle_all(), rm(), edit() - Entry commands
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output, log handler)
  - ticklist.core.service (TodoService)
  - ticklist.repl (interactive mode)
NOTES:
  - Running with no command launches the REPL
  - Global options: --db PATH, --verbose
  - Error messages go to stderr; exit codes: 0=success, 1=error
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from ..core.service import TodoService, open_service

# Typer app setup
app = typer.Typer(
    name="ticklist",
    help="A small terminal to-do list",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


@dataclass
class CLIOptions:
    """Global options collected by the app callback."""
    db_path: Optional[str] = None
    verbose: bool = False


cli_options = CLIOptions()


def configure_logging(verbose: bool = False) -> None:
    """
    Send log records to stderr through rich.

    Level comes from --verbose (DEBUG), else $TICKLIST_LOG_LEVEL, else WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def get_service() -> TodoService:
    """Open the TodoService for the database chosen on the command line."""
    return open_service(cli_options.db_path)


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    db: Optional[str] = typer.Option(None, "--db", help="Database file (default: $TICKLIST_DB or ~/.ticklist/ticklist.db)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Default callback - records global options, launches REPL when no command is given.
    """
    cli_options.db_path = db
    cli_options.verbose = verbose
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        repl_main(db)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    version,
    repl,
    add,
    ls,
    toggle,
    toggle_all,
    rm,
    edit,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
