"""
FILE: ticklist/cli/commands/system.py
PURPOSE: System commands (version, repl)
"""

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, cli_options, __version__


@app.command()
def version():
    """Show ticklist version."""
    console.print(f"ticklist v{__version__}")


@app.command()
def repl():
    """Launch the interactive REPL."""
    from ...repl import main as repl_main
    repl_main(cli_options.db_path)
