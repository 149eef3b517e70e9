# tests/test_console.py

from __future__ import annotations

import pytest

from tasklist.cli import commands
from tasklist.connectors.console_connector import handle_line, run_console_loop


def scripted(lines: list[str]):
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_plain_text_adds_task(state) -> None:
    reply = handle_line(state, "Buy milk | 2% please")

    (task,) = state.store.tasks()
    assert (task.title, task.description) == ("Buy milk", "2% please")
    assert "Added" in (reply or "")


def test_blank_line_is_ignored(state) -> None:
    assert handle_line(state, "   ") is None
    assert len(state.store) == 0


def test_crashing_command_is_reported(state, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(state, args, text):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)

    assert handle_line(state, "/list") == "Internal error while handling a command."


@pytest.mark.parametrize("last", ["/exit", "/QUIT", None])
def test_loop_runs_until_exit_or_eof(state, last) -> None:
    out: list[str] = []
    lines = ["Write spec", "", "/tab active"]
    if last:
        lines += [last, "never read"]

    run_console_loop(state, read=scripted(lines), write=out.append)

    assert [t.title for t in state.store.tasks()] == ["Write spec"]
    assert "No todos yet. Add one above!" in out[1]
    assert any("[To Do (1)]" in chunk for chunk in out)


def test_loop_stops_on_ctrl_c(state) -> None:
    def read(prompt: str) -> str:
        raise KeyboardInterrupt

    out: list[str] = []
    run_console_loop(state, read=read, write=out.append)
    assert out[-1] == ""
