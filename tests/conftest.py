# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.storage.json_slot import JsonSlotStorage
from tasklist.tasks.task_store import TaskListStore

from .fakes import FakeClock, FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        storage_key="todos",
        default_tab="all",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def store(storage: FakeStorage, clock: FakeClock) -> TaskListStore:
    return TaskListStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    """
    AppState wired to a real JSON slot file under tmp_path.

    Storage is real here because surviving a restart is part of what we test.
    """
    storage = JsonSlotStorage(settings.tasks_path, key=settings.storage_key)
    return AppState(settings=settings, store=TaskListStore(storage, clock=clock))
