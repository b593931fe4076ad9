"""
FILE: ticklist/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - TicklistCompleter (Completer for command/arg completion)
  - create_completer(get_state) -> TicklistCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - ticklist.core (Filter, State)
NOTES:
  - Suggests command names when at start of line
  - Suggests filter names after "filter" and after "ls --filter"
  - Suggests entry numbers (with their text) for commands taking one
  - Case-insensitive matching
"""

from typing import Callable, Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.models import Filter
from ..core.state import State


class TicklistCompleter(Completer):
    """
    Custom completer for the ticklist REPL.

    Args:
        get_state: Returns the live State (or None before a session exists)
    """

    COMMANDS = [
        "add", "ls", "toggle", "done", "all", "rm", "edit",
        "filter", "help", "clear", "exit", "quit",
    ]

    # Commands whose first argument is an entry number
    NUMBER_COMMANDS = {"toggle", "done", "rm", "edit"}

    COMMAND_FLAGS = {
        "ls": ["--filter"],
    }

    DESCRIPTIONS = {
        "add": "Add an entry",
        "ls": "List entries",
        "toggle": "Toggle an entry done/undone",
        "done": "Toggle an entry done/undone",
        "all": "Mark all done (or all undone)",
        "rm": "Remove an entry",
        "edit": "Edit an entry's text",
        "filter": "Show all, active or completed entries",
        "help": "Show available commands",
        "clear": "Clear the screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    def __init__(self, get_state: Callable[[], Optional[State]]):
        self.get_state = get_state

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        ends_with_space = text_before_cursor.endswith(" ")

        # Typing the command itself
        if not words or (not ends_with_space and len(words) == 1):
            yield from self._complete_commands(words[0] if words else "")
            return

        command = words[0].lower()

        if command == "filter":
            if len(words) == 1 and ends_with_space:
                yield from self._complete_filters("")
            elif len(words) == 2 and not ends_with_space:
                yield from self._complete_filters(words[1])
            return

        # Value of --filter
        if ends_with_space and words[-1] == "--filter":
            yield from self._complete_filters("")
            return
        if not ends_with_space and len(words) >= 2 and words[-2] == "--filter":
            yield from self._complete_filters(words[-1])
            return

        if command in self.NUMBER_COMMANDS:
            if len(words) == 1 and ends_with_space:
                yield from self._complete_entry_numbers("")
            elif len(words) == 2 and not ends_with_space:
                yield from self._complete_entry_numbers(words[1])
            return

        last_word = "" if ends_with_space else words[-1]
        if ends_with_space or last_word.startswith("--"):
            yield from self._complete_flags(command, last_word)

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.DESCRIPTIONS.get(command, ""),
                )

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word.lower()):
                yield Completion(flag, start_position=-len(word), display=flag)

    def _complete_filters(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for f in Filter:
            if f.value.startswith(word_lower):
                yield Completion(
                    f.value,
                    start_position=-len(word),
                    display=f.value,
                    display_meta=f"Show {f.label.lower()} entries",
                )

    def _complete_entry_numbers(self, word: str) -> Iterable[Completion]:
        """Complete entry numbers, labelled with the entry text."""
        state = self.get_state()
        if state is None:
            return

        for idx, entry in state.visible()[:200]:
            number = str(idx + 1)
            if number.startswith(word):
                text = entry.description
                display_text = text if len(text) <= 40 else text[:37] + "..."
                marker = "✓" if entry.completed else "○"
                yield Completion(
                    number,
                    start_position=-len(word),
                    display=number,
                    display_meta=f"{marker} {display_text}",
                )


def create_completer(get_state: Callable[[], Optional[State]]) -> TicklistCompleter:
    """
    Create and return a TicklistCompleter instance.

    Usage:
        completer = create_completer(lambda: repl_context.state)
        session = PromptSession(completer=completer)
    """
    return TicklistCompleter(get_state)
