# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from datetime import datetime
from typing import Any, Protocol

TaskRecord = dict[str, Any]
# Stored shape: {"id", "title", "description", "completed", "createdAt"}.


class PersistenceAdapter(Protocol):
    """
    One local key-value slot holding the whole serialized task list.

    load() returns None when nothing was saved yet (first run).
    save() overwrites whatever the slot held before.
    """

    def load(self) -> list[TaskRecord] | None: ...

    def save(self, records: list[TaskRecord]) -> None: ...


class Clock(Protocol):
    """Returns the current time as an aware UTC datetime."""

    def __call__(self) -> datetime: ...
