# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

TaskId = int | str


class TaskTab(StrEnum):
    """
    Status filter shown as tabs above the list.

    Notes:
    - "active" is rendered as "To Do" to match the labels users already know.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return _TAB_LABELS[self]

    @classmethod
    def parse(cls, raw: str | None) -> TaskTab:
        if not raw:
            return cls.ALL
        key = raw.strip().lower()
        key = _TAB_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.ALL


_TAB_LABELS = {
    TaskTab.ALL: "All",
    TaskTab.ACTIVE: "To Do",
    TaskTab.COMPLETED: "Completed",
}

_TAB_ALIASES = {
    "a": "all",
    "todo": "active",
    "t": "active",
    "open": "active",
    "done": "completed",
    "c": "completed",
    "d": "completed",
}


@dataclass(frozen=True, slots=True)
class Task:
    id: TaskId
    title: str
    description: str
    completed: bool
    created_at: datetime


# ---- edit mode ----


@dataclass(frozen=True, slots=True)
class Idle:
    """No task is being edited."""


@dataclass(frozen=True, slots=True)
class Editing:
    """Exactly one task is being edited; title/description are the unsaved buffers."""

    task_id: TaskId
    title: str
    description: str


EditState = Idle | Editing

IDLE = Idle()
