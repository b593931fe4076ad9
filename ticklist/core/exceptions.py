"""
FILE: ticklist/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TicklistError (base exception)
  - InvalidInputError
  - PersistenceError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TicklistError for easy catching
  - Out-of-range indices passed to State raise plain IndexError;
    UI layers validate user input and raise InvalidInputError instead
  - Core raises these, UI layers catch and display
"""


class TicklistError(Exception):
    """Base exception for all ticklist errors."""
    pass


class InvalidInputError(TicklistError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)


class PersistenceError(TicklistError):
    """Saving the entry list to the store failed."""

    def __init__(self, key: str, cause: Exception):
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to save entries under '{key}': {cause}")
