"""
FILE: ticklist/core/service.py
PURPOSE: Orchestration layer between the UI command surface, State and storage
EXPORTS:
  - TodoService (dispatch commands, persist, notify subscribers)
  - open_service(db_path) -> TodoService
  - parse_entry_number(raw, state) -> int
DEPENDENCIES:
  - ticklist.core.state (State)
  - ticklist.core.commands (command dataclasses)
  - ticklist.core.storage (KeyValueStore, SqliteStore, load/save)
  - ticklist.core.exceptions (InvalidInputError, PersistenceError)
NOTES:
  - Every dispatched command is followed by a save of the full entry list,
    completed before dispatch() returns
  - Save failures propagate as PersistenceError (no retry)
  - UI layers call service functions, never the store directly
"""

import logging
from typing import Callable, List, Optional

from .state import State
from .commands import (
    Command,
    Add,
    Edit,
    Remove,
    SetFilter,
    ToggleAll,
    ToggleEdit,
    Toggle,
    Focus,
)
from .constants import STORAGE_KEY, resolve_db_path
from .exceptions import InvalidInputError
from .storage import KeyValueStore, SqliteStore, load_entries, save_entries

logger = logging.getLogger(__name__)

Listener = Callable[[State, Command], None]


class TodoService:
    """
    Owns the State for one session and keeps the store in sync with it.

    Args:
        store: Where the entry list is persisted
        key: Slot key inside the store
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key
        self.state = State(load_entries(store, key))
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every dispatched command.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, command: Command) -> State:
        """
        Apply a command to the state, save, then notify subscribers.

        Raises:
            IndexError: If the command carries an out-of-range index
            PersistenceError: If the save fails
            TypeError: If the command type is unknown
        """
        state = self.state

        if isinstance(command, Add):
            state.add(command.text)
        elif isinstance(command, Edit):
            state.complete_edit(command.idx, command.text)
        elif isinstance(command, Remove):
            state.remove(command.idx)
        elif isinstance(command, SetFilter):
            state.set_filter(command.filter)
        elif isinstance(command, ToggleEdit):
            state.toggle_edit(command.idx)
        elif isinstance(command, ToggleAll):
            state.toggle_all(not state.is_all_completed())
        elif isinstance(command, Toggle):
            state.toggle(command.idx)
        elif isinstance(command, Focus):
            pass
        else:
            raise TypeError(f"Unknown command: {command!r}")

        logger.debug("Applied %r", command)
        self.save()

        for listener in list(self._listeners):
            listener(state, command)

        return state

    def save(self) -> None:
        """Persist the current entry list."""
        save_entries(self.store, self.key, self.state.entries)


def open_service(db_path: Optional[str] = None) -> TodoService:
    """
    Create a TodoService backed by the on-disk SQLite store.

    Args:
        db_path: Explicit database path (falls back to $TICKLIST_DB, then default)
    """
    path = resolve_db_path(db_path)
    logger.debug("Using database %s", path)
    return TodoService(SqliteStore(path))


def parse_entry_number(raw: str, state: State) -> int:
    """
    Convert a 1-based entry number typed by the user into an index.

    Args:
        raw: User input such as "3" or "#3"
        state: Current state (for the range check)

    Returns:
        Zero-based index into state.entries

    Raises:
        InvalidInputError: If the input is not a number or out of range
    """
    text = str(raw).strip().lstrip("#")
    try:
        number = int(text)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not an entry number")

    if not 1 <= number <= len(state.entries):
        if state.is_empty():
            raise InvalidInputError(f"No entry #{number} (the list is empty)")
        raise InvalidInputError(f"No entry #{number} (valid: 1-{len(state.entries)})")

    return number - 1
