# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the JSON slot storage into the task store and AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.json_slot import JsonSlotStorage
from ..tasks.task_models import TaskTab
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = JsonSlotStorage(settings.tasks_path, key=settings.storage_key)
    store = TaskListStore(storage)
    logger.debug("Storage slot %r at %s", storage.key, storage.path)

    return AppState(
        settings=settings,
        store=store,
        tab=TaskTab.parse(getattr(settings, "default_tab", "all")),
    )
