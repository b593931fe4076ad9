"""
FILE: ticklist/core/state.py
PURPOSE: The entry list, current filter and edit buffer, with all mutation rules
EXPORTS:
  - State
DEPENDENCIES:
  - ticklist.core.models (Entry, Filter)
NOTES:
  - Indices are zero-based positions into entries and shift on remove
  - Out-of-range or negative indices raise IndexError before any mutation
  - editing_index is the single source of truth for the entry being edited;
    Entry.editing mirrors it and is never set anywhere else
  - State never persists itself; TodoService saves after each command
"""

from typing import List, Optional, Tuple

from .models import Entry, Filter


class State:
    """
    Ordered entries plus view filter and in-progress edit text.

    Attributes:
        entries: Entries in insertion (display) order
        filter: Current view filter
        edit_value: Text of the in-progress edit, "" when nothing is editing
    """

    def __init__(
        self,
        entries: Optional[List[Entry]] = None,
        filter: Filter = Filter.ALL,
        edit_value: str = "",
    ):
        self.entries: List[Entry] = list(entries) if entries else []
        self.filter = filter
        self.edit_value = edit_value
        self._editing_index: Optional[int] = None

        # Loaded data may carry stale editing flags; keep only the first one
        for idx, entry in enumerate(self.entries):
            if entry.editing and self._editing_index is None:
                self._editing_index = idx
                if not self.edit_value:
                    self.edit_value = entry.description
            else:
                entry.editing = False

    @property
    def editing_index(self) -> Optional[int]:
        return self._editing_index

    def __len__(self) -> int:
        return len(self.entries)

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self.entries):
            raise IndexError(f"entry index {idx} out of range (0..{len(self.entries) - 1})")

    # --- Mutations ---

    def add(self, text: str) -> Optional[Entry]:
        """
        Append a new entry with the trimmed text.

        Returns:
            The new Entry, or None when the text is empty after trimming
        """
        description = text.strip()
        if not description:
            return None

        entry = Entry(description=description)
        self.entries.append(entry)
        return entry

    def remove(self, idx: int) -> Entry:
        """Delete the entry at idx and return it."""
        self._check_index(idx)

        if self._editing_index is not None:
            if self._editing_index == idx:
                self._editing_index = None
                self.edit_value = ""
            elif self._editing_index > idx:
                self._editing_index -= 1

        return self.entries.pop(idx)

    def toggle(self, idx: int) -> Entry:
        """Flip the completed flag of the entry at idx."""
        self._check_index(idx)
        entry = self.entries[idx]
        entry.completed = not entry.completed
        return entry

    def toggle_all(self, status: bool) -> None:
        """Set completed = status on every entry."""
        for entry in self.entries:
            entry.completed = status

    def clear_all_edit(self) -> None:
        """End any in-progress edit (the buffer is left untouched)."""
        if self._editing_index is not None:
            self.entries[self._editing_index].editing = False
            self._editing_index = None

    def toggle_edit(self, idx: int) -> Entry:
        """
        Start editing the entry at idx.

        Any other entry stops editing first, and edit_value is loaded with
        the entry's description in the same call.
        """
        self._check_index(idx)
        self.clear_all_edit()

        entry = self.entries[idx]
        entry.editing = True
        self._editing_index = idx
        self.edit_value = entry.description
        return entry

    def complete_edit(self, idx: int, new_text: str) -> Entry:
        """
        Store the edited text on the entry at idx and finish editing.

        Whichever entry was being edited stops editing, even if it is not idx.

        Note:
            No empty-text guard: an empty edit leaves an empty description.
        """
        self._check_index(idx)

        entry = self.entries[idx]
        entry.description = new_text.strip()
        self.clear_all_edit()
        self.edit_value = ""
        return entry

    def set_filter(self, filter: Filter) -> None:
        self.filter = filter

    # --- Queries ---

    def is_all_completed(self) -> bool:
        """True iff there is at least one entry and every entry is completed."""
        return bool(self.entries) and all(e.completed for e in self.entries)

    def total(self) -> int:
        """Number of entries still to do (ignores the current filter)."""
        return sum(1 for e in self.entries if not e.completed)

    def completed_count(self) -> int:
        return len(self.entries) - self.total()

    def is_empty(self) -> bool:
        return not self.entries

    def editing_entry(self) -> Optional[Entry]:
        if self._editing_index is None:
            return None
        return self.entries[self._editing_index]

    def visible(self) -> List[Tuple[int, Entry]]:
        """
        Entries passing the current filter, paired with their real index.

        The indices can be passed straight back into the mutation methods.
        """
        return [
            (idx, entry)
            for idx, entry in enumerate(self.entries)
            if self.filter.matches(entry)
        ]
