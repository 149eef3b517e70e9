# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime

from ..core.ports import Clock, PersistenceAdapter
from . import task_views
from .task_codec import deserialize_tasks, serialize_tasks
from .task_models import IDLE, Editing, EditState, Task, TaskId, TaskTab

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskListStore:
    """
    In-memory task list synced to one persistence slot.

    The list is the single source of truth:
    - loaded once from the adapter at construction
    - saved in full after every committed mutation (best-effort, no rollback)

    Invalid input (empty titles) and unknown ids are ignored: the operation is
    a no-op and nothing is raised. Results are returned so a caller can tell.

    Edit mode is exclusive: at most one task is being edited, and starting an
    edit on another task drops the unsaved buffers of the previous one.
    """

    def __init__(self, persistence: PersistenceAdapter, *, clock: Clock | None = None) -> None:
        self._persistence = persistence
        self._clock: Clock = clock or _utc_now
        self._tasks: list[Task] = []
        self._edit: EditState = IDLE
        self._last_id = 0
        self._load()

    # ---- persistence ----

    def _load(self) -> None:
        try:
            data = self._persistence.load()
            tasks = deserialize_tasks(data)
        except Exception:
            logger.exception("Failed to load tasks; starting with an empty list.")
            return

        self._tasks = tasks
        int_ids = [t.id for t in self._tasks if isinstance(t.id, int)]
        self._last_id = max(int_ids, default=0)
        logger.info("TaskListStore ready total=%d", len(self._tasks))

    def _save(self) -> None:
        try:
            self._persistence.save(serialize_tasks(self._tasks))
        except Exception:
            # In-memory state stays authoritative; the next mutation retries the full save.
            logger.exception("Failed to save %d tasks.", len(self._tasks))

    # ---- low-level helpers ----

    def _new_id(self, now: datetime) -> int:
        # Millisecond timestamp, bumped past every id already handed out.
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _index_of(self, task_id: TaskId) -> int | None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: TaskId) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    @property
    def edit_state(self) -> EditState:
        return self._edit

    @property
    def editing_id(self) -> TaskId | None:
        return self._edit.task_id if isinstance(self._edit, Editing) else None

    def list_visible(self, tab: TaskTab | str = TaskTab.ALL, search_term: str = "") -> list[Task]:
        return task_views.list_visible(self._tasks, tab, search_term)

    def counts(self) -> dict[TaskTab, int]:
        return task_views.tab_counts(self._tasks)

    # ---- mutations ----

    def add(self, title: str, description: str = "") -> Task | None:
        title = (title or "").strip()
        if not title:
            logger.debug("Ignoring add with empty title.")
            return None

        now = self._clock()
        task = Task(
            id=self._new_id(now),
            title=title,
            description=(description or "").strip(),
            completed=False,
            created_at=now,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        self._save()
        return task

    def delete(self, task_id: TaskId) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Ignoring delete of unknown id=%r", task_id)
            return False

        del self._tasks[idx]
        if self.editing_id == task_id:
            self._edit = IDLE
        logger.debug("Task deleted id=%s", task_id)
        self._save()
        return True

    def toggle_complete(self, task_id: TaskId) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Ignoring toggle of unknown id=%r", task_id)
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self._save()
        return task

    # ---- edit mode ----

    def start_edit(self, task_id: TaskId) -> bool:
        task = self.get(task_id)
        if task is None:
            logger.debug("Ignoring start_edit of unknown id=%r", task_id)
            return False

        if isinstance(self._edit, Editing) and self._edit.task_id != task_id:
            logger.debug("Abandoning unsaved edit of id=%s", self._edit.task_id)

        self._edit = Editing(
            task_id=task.id,
            title=task.title,
            description=(task.description or "").strip(),
        )
        return True

    def update_edit(self, *, title: str | None = None, description: str | None = None) -> bool:
        if not isinstance(self._edit, Editing):
            return False

        self._edit = replace(
            self._edit,
            title=self._edit.title if title is None else title,
            description=self._edit.description if description is None else description,
        )
        return True

    def commit_edit(self) -> Task | None:
        edit = self._edit
        if not isinstance(edit, Editing):
            return None

        title = edit.title.strip()
        if not title:
            logger.debug("Ignoring commit with empty title (id=%s).", edit.task_id)
            return None

        self._edit = IDLE
        idx = self._index_of(edit.task_id)
        if idx is None:
            logger.debug("Edited task id=%s no longer exists.", edit.task_id)
            return None

        task = replace(self._tasks[idx], title=title, description=edit.description.strip())
        self._tasks[idx] = task
        logger.debug("Task edited id=%s title=%r", task.id, task.title)
        self._save()
        return task

    def cancel_edit(self) -> None:
        self._edit = IDLE
