# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.cli.render import render_board
from tasklist.storage.json_slot import JsonSlotStorage
from tasklist.tasks.task_models import IDLE, Editing, TaskTab


def run(state, line: str) -> str:
    reply = registry.handle(state, line)
    assert reply is not None
    return reply


def test_command_registry_routes_by_name_and_alias(state) -> None:
    reg = CommandRegistry()
    calls: list[tuple[list[str], str]] = []

    def handler(state, args, text):
        calls.append((args, text))
        return f"ok:{len(calls)}"

    reg.register("b", handler, "b", aliases=["bee"])

    assert reg.handle(state, "/b  x  y ") == "ok:1"
    assert reg.handle(state, "/BEE y | z") == "ok:2"
    assert calls == [(["x", "y"], "x  y"), (["y", "|", "z"], "y | z")]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    text = run(state, "/help")
    for name in ("/add", "/done", "/rm", "/edit", "/save", "/cancel", "/tab", "/search"):
        assert name in text


def test_add_with_description(state) -> None:
    reply = run(state, "/add Buy milk | 2% please")

    (task,) = state.store.tasks()
    assert task.title == "Buy milk"
    assert task.description == "2% please"
    assert f"Added {task.id}." in reply
    assert "Buy milk" in reply


def test_add_without_title(state) -> None:
    assert "Title required" in run(state, "/add   | only a description")
    assert len(state.store) == 0


def test_done_toggles_and_reports(state) -> None:
    task = state.store.add("Write spec")

    assert f"Task {task.id} completed." in run(state, f"/done {task.id}")
    assert state.store.get(task.id).completed is True
    assert f"Task {task.id} reopened." in run(state, f"/x {task.id}")
    assert state.store.get(task.id).completed is False


def test_done_and_rm_unknown_id(state) -> None:
    assert run(state, "/done 42") == "Task 42 not found."
    assert run(state, "/rm nope") == "Task nope not found."
    assert run(state, "/rm") == "Usage: /rm <id>"


def test_rm_accepts_trailing_dot(state) -> None:
    task = state.store.add("a")
    assert f"Task {task.id} removed." in run(state, f"/rm {task.id}.")
    assert len(state.store) == 0


def test_edit_flow(state) -> None:
    task = state.store.add("Buy milk", "2%")

    board = run(state, f"/edit {task.id}")
    assert f"Editing {task.id}:" in board
    assert "title: Buy milk" in board

    run(state, "/title Buy oat milk")
    run(state, "/desc")
    assert state.store.edit_state == Editing(task_id=task.id, title="Buy oat milk", description="")

    reply = run(state, "/save")
    assert f"Task {task.id} saved." in reply
    assert state.store.get(task.id).title == "Buy oat milk"
    assert state.store.get(task.id).description == ""
    assert state.store.edit_state == IDLE


def test_edit_with_empty_title_stays_in_edit(state) -> None:
    task = state.store.add("Buy milk")
    run(state, f"/edit {task.id}")
    run(state, "/title")

    assert "Title required" in run(state, "/save")
    assert isinstance(state.store.edit_state, Editing)

    assert "Edit cancelled." in run(state, "/cancel")
    assert state.store.get(task.id).title == "Buy milk"


def test_edit_inline(state) -> None:
    task = state.store.add("Buy milk")

    run(state, f"/edit {task.id} Buy bread | whole grain")

    edited = state.store.get(task.id)
    assert (edited.title, edited.description) == ("Buy bread", "whole grain")
    assert state.store.edit_state == IDLE


def test_edit_refuses_completed_task(state) -> None:
    task = state.store.add("done already")
    state.store.toggle_complete(task.id)

    assert "reopen it" in run(state, f"/edit {task.id}")
    assert state.store.edit_state == IDLE


def test_buffer_commands_need_edit_mode(state) -> None:
    for line in ("/title x", "/desc y", "/save"):
        assert "Not editing" in run(state, line)
    assert run(state, "/cancel") == "Not editing."


def test_tab_and_search(state) -> None:
    spec = state.store.add("Write spec")
    state.store.add("Buy Milk")
    state.store.toggle_complete(spec.id)

    board = run(state, "/tab done")
    assert state.tab is TaskTab.COMPLETED
    assert "Write spec" in board
    assert "Buy Milk" not in board

    run(state, "/tab all")
    board = run(state, "/search milk")
    assert state.search_term == "milk"
    assert "Search: 'milk'" in board
    assert "Buy Milk" in board
    assert "Write spec" not in board

    board = run(state, "/search nothing-here")
    assert "No todos match your search" in board

    run(state, "/search")
    assert state.search_term == ""


def test_status(state, settings) -> None:
    state.store.add("a")
    text = run(state, "/status")
    assert str(settings.tasks_path) in text
    assert "1 total, 1 to do, 0 completed" in text


def test_render_board(state) -> None:
    a = state.store.add("Write spec")
    state.store.add("Buy milk", "2% please\nfull fat is fine")
    state.store.toggle_complete(a.id)

    lines = render_board(state).splitlines()

    assert lines[0] == "[All (2)] | To Do (1) | Completed (1)"
    assert f"[x] {a.id}  Write spec" in lines
    assert "      2% please" in lines
    assert "      full fat is fine" in lines


def test_render_empty_board(state) -> None:
    state.tab = TaskTab.ACTIVE
    board = render_board(state)
    assert "All (0) | [To Do (0)] | Completed (0)" in board
    assert "No active todos. Great job!" in board


def test_commands_persist(state, settings) -> None:
    run(state, "/add Write spec")
    records = JsonSlotStorage(settings.tasks_path).load()
    assert [r["title"] for r in records] == ["Write spec"]
