"""
FILE: ticklist/core/storage.py
PURPOSE: Key-value persistence slot for the entry list
EXPORTS:
  - KeyValueStore (interface)
  - MemoryStore (dict-backed store)
  - SqliteStore (SQLite-backed store)
  - load_entries(store, key) -> List[Entry]
  - save_entries(store, key, entries) -> None
DEPENDENCIES:
  - sqlite3, json, logging, pathlib (stdlib)
  - ticklist.core.models (Entry)
  - ticklist.core.exceptions (PersistenceError)
NOTES:
  - The slot holds a JSON array of {description, completed, editing}
  - Loading never fails: absent or unreadable data gives an empty list
  - Saving failures are logged and raised as PersistenceError
  - SqliteStore opens a connection per operation and closes it after
"""

import json
import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .models import Entry
from .exceptions import PersistenceError

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Minimal string key-value store interface."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """In-process store, used by tests and for throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class SqliteStore(KeyValueStore):
    """
    Key-value store backed by a single SQLite table.

    Creates the parent directory and the kv table on first use.
    """

    SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)"

    def __init__(self, path: Path):
        self.path = Path(path)

    def get_connection(self) -> sqlite3.Connection:
        """
        Get SQLite connection to the store database.

        Creates the data directory if it doesn't exist and initializes
        the schema (safe to call repeatedly).
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute(self.SCHEMA)
        return conn

    def get(self, key: str) -> Optional[str]:
        with closing(self.get_connection()) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()

        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with closing(self.get_connection()) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key, value),
            )
            conn.commit()

    def delete(self, key: str) -> None:
        with closing(self.get_connection()) as conn:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()


def load_entries(store: KeyValueStore, key: str) -> List[Entry]:
    """
    Read the entry list from the store.

    Args:
        store: Store holding the slot
        key: Slot key

    Returns:
        Entries in stored order; an empty list if the slot is absent or
        its content cannot be read
    """
    try:
        raw = store.get(key)
    except (sqlite3.Error, OSError) as e:
        logger.warning("Could not read '%s', starting empty: %s", key, e)
        return []

    if raw is None:
        logger.debug("No saved entries under '%s'", key)
        return []

    try:
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError(f"expected a list, got {type(payload).__name__}")
        entries = [Entry.from_dict(item) for item in payload]
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        logger.warning("Saved entries under '%s' are unreadable, starting empty: %s", key, e)
        return []

    logger.debug("Loaded %d entries from '%s'", len(entries), key)
    return entries


def save_entries(store: KeyValueStore, key: str, entries: Iterable[Entry]) -> None:
    """
    Write the full entry list to the store.

    Raises:
        PersistenceError: If the store rejects the write
    """
    payload = [entry.to_dict() for entry in entries]

    try:
        store.set(key, json.dumps(payload))
    except (sqlite3.Error, OSError, TypeError, ValueError) as e:
        logger.error("Saving %d entries under '%s' failed: %s", len(payload), key, e)
        raise PersistenceError(key, e) from e

    logger.debug("Saved %d entries under '%s'", len(payload), key)
