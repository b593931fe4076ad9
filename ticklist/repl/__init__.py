"""
FILE: ticklist/repl/__init__.py
PURPOSE: REPL package for interactive list management
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - ticklist.core.service (TodoService)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete and command history
"""

from .main import main

__all__ = ["main"]
