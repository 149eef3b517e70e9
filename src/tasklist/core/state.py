# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task, TaskTab
from ..tasks.task_store import TaskListStore


@dataclass
class AppState:
    # Settings live on the state for easy access from commands and rendering.
    settings: object

    store: TaskListStore

    # View inputs owned by the presentation; never persisted.
    tab: TaskTab = TaskTab.ALL
    search_term: str = ""

    def visible_tasks(self) -> list[Task]:
        return self.store.list_visible(self.tab, self.search_term)
