"""Tests for State mutation rules and queries."""

import pytest

from ticklist.core.models import Entry, Filter
from ticklist.core.state import State


def make_state(*descriptions, completed=()):
    state = State()
    for text in descriptions:
        state.add(text)
    for idx in completed:
        state.toggle(idx)
    return state


def editing_flags(state):
    return [e.editing for e in state.entries]


# --- add ---

@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_ignores_empty_text(text):
    state = make_state("a")

    assert state.add(text) is None
    assert [e.description for e in state.entries] == ["a"]


def test_add_trims_and_appends():
    state = State()

    entry = state.add("  buy milk  ")

    assert entry == Entry("buy milk", completed=False, editing=False)
    assert state.entries == [Entry("buy milk")]


def test_new_state_defaults():
    state = State()

    assert state.entries == []
    assert state.filter is Filter.ALL
    assert state.edit_value == ""
    assert state.editing_index is None


# --- toggle / total / is_all_completed ---

def test_total_tracks_toggles():
    state = make_state("a", "b", "c")

    for idx in (0, 2, 0, 1):
        state.toggle(idx)
        assert state.total() == sum(1 for e in state.entries if not e.completed)

    assert state.completed_count() == len(state) - state.total()


def test_toggle_all():
    state = make_state("a", "b", "c", completed=(1,))

    state.toggle_all(True)
    assert state.total() == 0
    assert state.is_all_completed()

    state.toggle_all(False)
    assert state.total() == len(state.entries)
    assert not state.is_all_completed()


def test_is_all_completed_on_empty_list_is_false():
    state = State()

    assert state.is_all_completed() is False
    state.toggle_all(True)
    assert state.entries == []


def test_total_ignores_filter():
    state = make_state("a", "b", completed=(0,))
    state.set_filter(Filter.COMPLETED)

    assert state.total() == 1


def test_scenario_add_and_toggle():
    state = State()
    state.add("a")
    state.add("b")
    assert [e.description for e in state.entries] == ["a", "b"]
    assert state.total() == 2

    state.toggle(0)
    assert state.total() == 1
    assert state.is_all_completed() is False

    state.toggle(1)
    assert state.total() == 0
    assert state.is_all_completed() is True


# --- remove ---

def test_remove_shifts_and_preserves_order():
    state = make_state("a", "b", "c", "d")

    removed = state.remove(1)

    assert removed.description == "b"
    assert len(state.entries) == 3
    assert [e.description for e in state.entries] == ["a", "c", "d"]


def test_remove_editing_entry_ends_edit():
    state = make_state("a", "b")
    state.toggle_edit(1)

    state.remove(1)

    assert state.editing_index is None
    assert state.edit_value == ""
    assert not any(editing_flags(state))


def test_remove_before_editing_entry_shifts_editing_index():
    state = make_state("a", "b", "c")
    state.toggle_edit(2)

    state.remove(0)

    assert state.editing_index == 1
    assert state.editing_entry().description == "c"
    assert state.edit_value == "c"


def test_remove_after_editing_entry_keeps_editing_index():
    state = make_state("a", "b", "c")
    state.toggle_edit(0)

    state.remove(2)

    assert state.editing_index == 0
    assert editing_flags(state) == [True, False]


# --- editing ---

def test_toggle_edit_loads_edit_value():
    state = make_state("a", "b")

    state.toggle_edit(1)

    assert state.edit_value == "b"
    assert state.editing_index == 1
    assert editing_flags(state) == [False, True]


def test_toggle_edit_keeps_at_most_one_editing():
    state = make_state("a", "b", "c")

    for idx in (0, 2, 1, 1, 0):
        state.toggle_edit(idx)
        assert sum(editing_flags(state)) == 1

    state.toggle_edit(0)
    state.toggle_edit(2)
    assert editing_flags(state) == [False, False, True]
    assert state.edit_value == "c"


def test_clear_all_edit():
    state = make_state("a", "b")
    state.toggle_edit(0)

    state.clear_all_edit()

    assert state.editing_index is None
    assert not any(editing_flags(state))


def test_complete_edit():
    state = make_state("a", "b")
    state.toggle_edit(1)

    entry = state.complete_edit(1, "  new text ")

    assert entry is state.entries[1]
    assert state.entries[1].description == "new text"
    assert state.entries[1].editing is False
    assert state.edit_value == ""
    assert state.editing_index is None


def test_complete_edit_keeps_completed_flag():
    state = make_state("a", completed=(0,))
    state.toggle_edit(0)

    state.complete_edit(0, "a2")

    assert state.entries[0].completed is True


def test_complete_edit_applies_empty_text():
    state = make_state("a")
    state.toggle_edit(0)

    state.complete_edit(0, "   ")

    assert state.entries[0].description == ""
    assert len(state.entries) == 1


def test_complete_edit_on_other_entry_ends_current_edit():
    state = make_state("a", "b")
    state.toggle_edit(0)

    state.complete_edit(1, "x")

    assert state.editing_index is None
    assert not any(editing_flags(state))
    assert state.edit_value == ""
    assert [e.description for e in state.entries] == ["a", "x"]


# --- filter / visible ---

def test_set_filter_does_not_touch_entries():
    state = make_state("a", "b", completed=(1,))
    before = [Entry(e.description, e.completed, e.editing) for e in state.entries]

    for f in Filter:
        state.set_filter(f)
        assert state.filter is f
        assert state.entries == before


def test_visible_pairs_use_real_indices():
    state = make_state("a", "b", "c", completed=(1,))

    state.set_filter(Filter.ACTIVE)
    assert [(i, e.description) for i, e in state.visible()] == [(0, "a"), (2, "c")]

    state.set_filter(Filter.COMPLETED)
    assert [(i, e.description) for i, e in state.visible()] == [(1, "b")]

    state.set_filter(Filter.ALL)
    assert len(state.visible()) == 3


# --- preconditions ---

@pytest.mark.parametrize("method", ["remove", "toggle", "toggle_edit"])
@pytest.mark.parametrize("idx", [-1, 2, 99])
def test_bad_index_raises_without_mutation(method, idx):
    state = make_state("a", "b")

    with pytest.raises(IndexError):
        getattr(state, method)(idx)

    assert [e.description for e in state.entries] == ["a", "b"]
    assert state.editing_index is None


def test_complete_edit_bad_index():
    state = make_state("a")

    with pytest.raises(IndexError):
        state.complete_edit(1, "x")


# --- construction from loaded entries ---

def test_loaded_entries_keep_only_first_editing_flag():
    entries = [
        Entry("a", editing=True),
        Entry("b"),
        Entry("c", editing=True),
    ]

    state = State(entries)

    assert state.editing_index == 0
    assert editing_flags(state) == [True, False, False]
    assert state.edit_value == "a"
