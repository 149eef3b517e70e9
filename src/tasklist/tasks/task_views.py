# src/tasklist/tasks/task_views.py

"""
Read-time projections over the task list.

Everything here is pure: inputs are never mutated and nothing is cached.
The only inputs besides the list itself are the current tab and search term.
"""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskTab


def filter_by_tab(tasks: Iterable[Task], tab: TaskTab | str) -> list[Task]:
    tab = TaskTab.parse(tab)
    if tab is TaskTab.ACTIVE:
        return [t for t in tasks if not t.completed]
    if tab is TaskTab.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def matches_search(task: Task, term: str | None) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = (term or "").lower()
    return needle in task.title.lower() or needle in (task.description or "").lower()


def list_visible(tasks: Iterable[Task], tab: TaskTab | str, term: str | None) -> list[Task]:
    return [t for t in filter_by_tab(tasks, tab) if matches_search(t, term)]


def tab_counts(tasks: Iterable[Task]) -> dict[TaskTab, int]:
    total = 0
    done = 0
    for t in tasks:
        total += 1
        if t.completed:
            done += 1
    return {
        TaskTab.ALL: total,
        TaskTab.ACTIVE: total - done,
        TaskTab.COMPLETED: done,
    }


def empty_message(tab: TaskTab | str, term: str | None) -> str:
    """What to show instead of an empty list."""
    if term:
        return "No todos match your search"
    tab = TaskTab.parse(tab)
    if tab is TaskTab.ACTIVE:
        return "No active todos. Great job!"
    if tab is TaskTab.COMPLETED:
        return "No completed todos yet."
    return "No todos yet. Add one above!"
