"""
FILE: ticklist/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .entries import (
    add,
    ls,
    toggle,
    toggle_all,
    rm,
    edit,
)
from .system import (
    version,
    repl,
)

__all__ = [
    "add",
    "ls",
    "toggle",
    "toggle_all",
    "rm",
    "edit",
    "version",
    "repl",
]
