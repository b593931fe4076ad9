"""
FILE: ticklist/core/commands.py
PURPOSE: Messages the presentation layer sends to TodoService
EXPORTS:
  - Add, Edit, Remove, SetFilter, ToggleAll, ToggleEdit, Toggle, Focus
  - Command (union of the above)
NOTES:
  - Frozen dataclasses; indices are zero-based positions into State.entries
  - Focus carries no state change, it only asks the UI to focus the edit field
"""

from dataclasses import dataclass
from typing import Union

from .models import Filter


@dataclass(frozen=True)
class Add:
    text: str


@dataclass(frozen=True)
class Edit:
    idx: int
    text: str


@dataclass(frozen=True)
class Remove:
    idx: int


@dataclass(frozen=True)
class SetFilter:
    filter: Filter


@dataclass(frozen=True)
class ToggleAll:
    pass


@dataclass(frozen=True)
class ToggleEdit:
    idx: int


@dataclass(frozen=True)
class Toggle:
    idx: int


@dataclass(frozen=True)
class Focus:
    pass


Command = Union[Add, Edit, Remove, SetFilter, ToggleAll, ToggleEdit, Toggle, Focus]
