"""Tests for Entry and Filter."""

import json

import pytest

from ticklist.core.exceptions import InvalidInputError
from ticklist.core.models import Entry, Filter


def test_entry_defaults():
    entry = Entry("buy milk")

    assert entry.completed is False
    assert entry.editing is False


def test_entry_to_dict_and_json():
    entry = Entry("buy milk", completed=True)

    assert entry.to_dict() == {"description": "buy milk", "completed": True, "editing": False}
    assert json.loads(entry.to_json()) == entry.to_dict()


def test_entry_from_dict_fills_missing_flags():
    entry = Entry.from_dict({"description": "walk dog"})

    assert entry == Entry("walk dog", completed=False, editing=False)


@pytest.mark.parametrize("payload", [
    {"completed": True},
    {"description": 42},
    ["not", "a", "dict"],
    "plain string",
    {"description": "a", "completed": "false"},
    {"description": "a", "completed": 1},
    {"description": "a", "editing": None},
])
def test_entry_from_dict_rejects_bad_payloads(payload):
    with pytest.raises(ValueError):
        Entry.from_dict(payload)


def test_filter_iteration_order_is_fixed():
    assert list(Filter) == [Filter.ALL, Filter.ACTIVE, Filter.COMPLETED]
    assert [f.label for f in Filter] == ["All", "Active", "Completed"]


def test_filter_predicates():
    todo = Entry("todo")
    done = Entry("done", completed=True)

    assert Filter.ALL.matches(todo) and Filter.ALL.matches(done)
    assert Filter.ACTIVE.matches(todo) and not Filter.ACTIVE.matches(done)
    assert Filter.COMPLETED.matches(done) and not Filter.COMPLETED.matches(todo)


def test_filter_parse_is_case_insensitive():
    assert Filter.parse("Active") is Filter.ACTIVE
    assert Filter.parse("  COMPLETED ") is Filter.COMPLETED


def test_filter_parse_unknown_name():
    with pytest.raises(InvalidInputError, match="Invalid filter 'someday'"):
        Filter.parse("someday")
