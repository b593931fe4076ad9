"""
FILE: ticklist/core/models.py
PURPOSE: Domain models for list entries and view filters
EXPORTS:
  - Entry (dataclass)
  - Filter (enum)
DEPENDENCIES:
  - dataclasses, enum, json (stdlib)
  - ticklist.core.exceptions (InvalidInputError)
NOTES:
  - Entry has to_dict()/from_dict() for the persisted JSON format
  - Entry.editing is written only by State (see state.py)
  - Filter iterates in the fixed order All, Active, Completed
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict
import json

from .exceptions import InvalidInputError


@dataclass
class Entry:
    """A single list item with a completion flag."""

    description: str
    completed: bool = False
    editing: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """
        Build an Entry from its persisted form.

        Raises:
            ValueError: If the payload is not a mapping with a string description
                and boolean flags
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry payload must be an object, got {type(data).__name__}")

        description = data.get("description")
        if not isinstance(description, str):
            raise ValueError("Entry payload is missing a string 'description'")

        completed = data.get("completed", False)
        editing = data.get("editing", False)
        for name, value in (("completed", completed), ("editing", editing)):
            if not isinstance(value, bool):
                raise ValueError(f"Entry payload field '{name}' must be true or false, got {value!r}")

        return cls(description=description, completed=completed, editing=editing)

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted form of the entry."""
        return asdict(self)

    def to_json(self) -> str:
        """Serialize entry to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


class Filter(Enum):
    """Which entries the list view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def matches(self, entry: Entry) -> bool:
        """Return True if the entry is visible under this filter."""
        if self is Filter.ACTIVE:
            return not entry.completed
        if self is Filter.COMPLETED:
            return entry.completed
        return True

    @classmethod
    def parse(cls, name: str) -> "Filter":
        """
        Look up a filter by name (case-insensitive).

        Raises:
            InvalidInputError: If the name is not a known filter
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise InvalidInputError(f"Invalid filter '{name}'. Must be one of: {valid}")
