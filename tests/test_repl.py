"""
Tests for the REPL: context, command handlers and the main loop.

Handlers run against an in-memory TodoService; output is captured from the
shared rich console.
"""

import builtins
import io
import subprocess
import sys
from pathlib import Path

import pytest

from ticklist.core.exceptions import PersistenceError
from ticklist.core.models import Filter
from ticklist.core.service import TodoService, open_service
from ticklist.core.storage import MemoryStore
from ticklist.repl.main import (
    REPLContext,
    console,
    execute_command,
    render_after_change,
    repl_context,
    run_repl,
)
from ticklist.repl.parser import parse_command

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def repl_service(monkeypatch):
    """Install an in-memory service in the global REPL context."""
    service = TodoService(MemoryStore())
    unsubscribe = service.subscribe(render_after_change)
    monkeypatch.setattr(repl_context, "service", service)
    monkeypatch.setattr(repl_context, "session", None)
    yield service
    unsubscribe()


def run(line):
    """Execute one REPL line and return what it printed."""
    with console.capture() as capture:
        keep_going = execute_command(parse_command(line))
    assert keep_going
    return capture.get()


def descriptions(service):
    return [e.description for e in service.state.entries]


# --- REPLContext ---

def test_prompt_reflects_filter():
    ctx = REPLContext()
    assert ctx.get_prompt() == "ticklist> "

    ctx.service = TodoService(MemoryStore())
    assert ctx.get_prompt() == "ticklist> "

    ctx.service.state.set_filter(Filter.ACTIVE)
    assert ctx.get_prompt() == "ticklist:[active]> "


def test_read_edit_simple_mode_uses_input(monkeypatch):
    monkeypatch.setattr(builtins, "input", lambda prompt: "typed text")

    assert REPLContext().read_edit(0, "current") == "typed text"


def test_read_edit_simple_mode_empty_line_keeps_current(monkeypatch):
    monkeypatch.setattr(builtins, "input", lambda prompt: "  ")

    with console.capture() as capture:
        assert REPLContext().read_edit(0, "current") == "current"

    assert "Current: current" in capture.get()


def test_read_edit_keeps_current_on_eof(monkeypatch):
    def raise_eof(prompt):
        raise EOFError

    monkeypatch.setattr(builtins, "input", raise_eof)

    assert REPLContext().read_edit(0, "current") == "current"


# --- handlers ---

def test_add_and_ls(repl_service):
    out = run("add Buy milk")
    assert descriptions(repl_service) == ["Buy milk"]
    assert "Buy milk" in out
    assert "1 item(s) left" in out

    out = run("ls")
    assert "Buy milk" in out


def test_add_keeps_dashes_and_spacing(repl_service):
    run("add fix the --verbose flag")
    run("add a  b")

    assert descriptions(repl_service) == ["fix the --verbose flag", "a  b"]


def test_add_whitespace_only(repl_service):
    out = run('add "   "')

    assert repl_service.state.entries == []
    assert "Nothing added" in out


def test_add_without_text(repl_service):
    out = run("add")

    assert "Entry text required" in out


def test_toggle_and_done_alias(repl_service):
    run("add a")
    run("add b")

    out = run("toggle 1")
    assert repl_service.state.entries[0].completed
    assert "Completed" in out

    out = run("done 1")
    assert not repl_service.state.entries[0].completed
    assert "Reopened" in out


@pytest.mark.parametrize("line, message", [
    ("toggle", "Entry number required"),
    ("toggle 9", "No entry #9"),
    ("rm abc", "not an entry number"),
    ("edit 0", "No entry #0"),
])
def test_bad_entry_numbers(repl_service, line, message):
    run("add a")

    out = run(line)

    assert message in out
    assert descriptions(repl_service) == ["a"]


def test_all_toggles_everything(repl_service):
    run("add a")
    run("add b")

    out = run("all")
    assert repl_service.state.is_all_completed()
    assert "Marked 2 entries done" in out
    assert "0 item(s) left" in out

    out = run("all")
    assert repl_service.state.total() == 2
    assert "not done" in out


def test_all_on_empty_list(repl_service):
    out = run("all")

    assert "No entries to toggle" in out


def test_rm(repl_service):
    run("add a")
    run("add b")

    out = run("rm 1")

    assert descriptions(repl_service) == ["b"]
    assert "Removed: a" in out


def test_edit_inline(repl_service):
    run("add old text")

    out = run("edit 1 new text")

    assert descriptions(repl_service) == ["new text"]
    assert repl_service.state.editing_index is None
    assert repl_service.state.edit_value == ""
    assert "Updated" in out


def test_edit_inline_keeps_dashes(repl_service):
    run("add old")

    run("edit 1 use --force  here")

    assert descriptions(repl_service) == ["use --force  here"]


def test_edit_prompts_with_current_text(repl_service, monkeypatch):
    run("add old text")
    seen = {}

    def fake_read_edit(idx, current):
        seen["idx"] = idx
        seen["current"] = current
        seen["editing"] = repl_service.state.editing_index
        return "  typed  "

    monkeypatch.setattr(repl_context, "read_edit", fake_read_edit)

    run("edit 1")

    assert seen == {"idx": 0, "current": "old text", "editing": 0}
    assert descriptions(repl_service) == ["typed"]
    assert repl_service.state.editing_index is None


def test_edit_to_empty_text_warns(repl_service, monkeypatch):
    run("add a")
    monkeypatch.setattr(repl_context, "read_edit", lambda idx, current: "")

    out = run("edit 1")

    assert descriptions(repl_service) == [""]
    assert "now has no text" in out


def test_filter_command(repl_service):
    run("add a")
    run("add b")
    run("toggle 2")

    out = run("filter completed")
    assert repl_service.state.filter is Filter.COMPLETED
    assert "b" in out

    out = run("filter")
    assert "Completed" in out

    out = run("filter later")
    assert "Invalid filter" in out
    assert repl_service.state.filter is Filter.COMPLETED


def test_ls_with_filter_flag(repl_service):
    run("add a")

    run("ls --filter active")
    assert repl_service.state.filter is Filter.ACTIVE

    out = run("ls --filter")
    assert "needs a value" in out


def test_empty_list_hint(repl_service):
    out = run("ls")

    assert "Nothing to do yet" in out


def test_unknown_command(repl_service):
    out = run("frobnicate")

    assert "Unknown command" in out


def test_exit_returns_false(repl_service):
    with console.capture():
        assert execute_command(parse_command("exit")) is False
        assert execute_command(parse_command("quit")) is False


def test_help(repl_service):
    out = run("help")

    assert "Available Commands" in out


# --- main loop ---

def test_run_repl_processes_lines_until_exit(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO())
    monkeypatch.setattr(repl_context, "service", None)
    lines = iter(["add first", "add second", "toggle 1", "exit"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(lines))
    service = TodoService(MemoryStore())

    with console.capture() as capture:
        run_repl(service)

    assert [e.description for e in service.state.entries] == ["first", "second"]
    assert service.state.entries[0].completed
    assert "Goodbye!" in capture.get()


def test_run_repl_stops_on_save_failure(monkeypatch):
    class FullStore(MemoryStore):
        def set(self, key, value):
            raise OSError("No space left on device")

    monkeypatch.setattr(sys, "stdin", io.StringIO())
    monkeypatch.setattr(repl_context, "service", None)
    lines = iter(["add first", "exit"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(lines))

    with console.capture() as capture:
        with pytest.raises(PersistenceError):
            run_repl(TodoService(FullStore()))

    assert "not saved" in capture.get()


def test_default_launches_repl(temp_db):
    """Running with no arguments starts the REPL (stdin is not a TTY here)."""
    result = subprocess.run(
        [sys.executable, "-m", "ticklist"],
        input="add from subprocess\nexit\n",
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=PROJECT_ROOT,
    )

    assert result.returncode == 0, result.stderr
    assert "ticklist REPL" in result.stdout
    assert "Goodbye!" in result.stdout

    assert [e.description for e in open_service().state.entries] == ["from subprocess"]
