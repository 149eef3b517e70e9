# src/tasklist/cli/render.py

"""Plain-text rendering of the board: tab bar, visible rows, edit panel."""

from __future__ import annotations

from ..core.state import AppState
from ..tasks.task_models import Editing, Task, TaskTab
from ..tasks.task_views import empty_message

DESC_INDENT = " " * 6


def render_tabs(state: AppState) -> str:
    counts = state.store.counts()
    cells = []
    for tab in TaskTab:
        cell = f"{tab.label} ({counts[tab]})"
        if tab is state.tab:
            cell = f"[{cell}]"
        cells.append(cell)
    return " | ".join(cells)


def render_task(task: Task, *, editing: bool = False) -> list[str]:
    mark = "x" if task.completed else " "
    suffix = "  (editing)" if editing else ""
    lines = [f"[{mark}] {task.id}  {task.title}{suffix}"]
    if task.description:
        for part in task.description.splitlines():
            lines.append(DESC_INDENT + part)
    return lines


def render_edit_panel(edit: Editing) -> list[str]:
    return [
        f"Editing {edit.task_id}:",
        f"  title: {edit.title}",
        f"  desc:  {edit.description}",
        "  /title <text>  /desc <text>  /save  /cancel",
    ]


def render_board(state: AppState) -> str:
    lines = [render_tabs(state)]
    if state.search_term:
        lines.append(f"Search: {state.search_term!r}")
    lines.append("-" * 40)

    visible = state.visible_tasks()
    editing_id = state.store.editing_id
    if not visible:
        lines.append(empty_message(state.tab, state.search_term))
    for task in visible:
        lines.extend(render_task(task, editing=task.id == editing_id))

    edit = state.store.edit_state
    if isinstance(edit, Editing):
        lines.append("")
        lines.extend(render_edit_panel(edit))

    return "\n".join(lines)
