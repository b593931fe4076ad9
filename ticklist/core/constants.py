"""
FILE: ticklist/core/constants.py
PURPOSE: Constants and path configuration used throughout the application
EXPORTS:
  - STORAGE_KEY: Key of the persistence slot holding the entry list
  - DATA_DIR: Default data directory (~/.ticklist)
  - DB_PATH: Default SQLite database location
  - DB_ENV_VAR, LOG_LEVEL_ENV_VAR: Environment variable names
  - resolve_db_path(override) -> Path
DEPENDENCIES:
  - os, pathlib (stdlib)
NOTES:
  - Single source of truth for the storage key
  - Path precedence: explicit override > $TICKLIST_DB > DB_PATH
"""

import os
from pathlib import Path
from typing import Optional

# Persistence slot
STORAGE_KEY = "ticklist.entries"

# Database file location (cross-platform)
DATA_DIR = Path.home() / ".ticklist"
DB_PATH = DATA_DIR / "ticklist.db"

# Environment overrides
DB_ENV_VAR = "TICKLIST_DB"
LOG_LEVEL_ENV_VAR = "TICKLIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_db_path(override: Optional[str] = None) -> Path:
    """
    Work out which database file to use.

    Args:
        override: Path given explicitly (e.g. the CLI --db option)

    Returns:
        Path to the SQLite database file
    """
    if override:
        return Path(override).expanduser()

    env_path = os.environ.get(DB_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    return DB_PATH
