"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ticklist.core.constants import DB_ENV_VAR
from ticklist.core.storage import MemoryStore
from ticklist.core.service import TodoService


@pytest.fixture(autouse=True)
def temp_db(monkeypatch, tmp_path):
    """Point every test at a throwaway database."""
    db_path = tmp_path / "test_ticklist.db"
    monkeypatch.setenv(DB_ENV_VAR, str(db_path))
    yield db_path


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def service(store):
    return TodoService(store)
