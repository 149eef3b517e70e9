# src/tasklist/tasks/task_codec.py

"""
Stored representation of the task list.

Records use the camelCase keys of the browser version of the app. Its local
storage keeps the `todos` value as a JSON string; that string can be pasted
into the slot unchanged and is decoded on load:

    {"id": 1714558830123, "title": "...", "description": "",
     "completed": false, "createdAt": "2024-05-01T10:20:30.123Z"}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0, UTC)


def format_timestamp(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


def parse_timestamp(raw: Any) -> datetime | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        ts = datetime.fromisoformat(raw.strip())
        if ts.tzinfo is None:
            return ts.replace(tzinfo=UTC)
        return ts.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "completed": task.completed,
        "createdAt": format_timestamp(task.created_at),
    }


def serialize_tasks(tasks: Iterable[Task]) -> list[dict[str, Any]]:
    return [task_to_record(t) for t in tasks]


def _coerce_id(raw: Any) -> TaskId | None:
    # bool is an int subclass; true/false are not ids.
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


def record_to_task(raw: Any) -> Task | None:
    """Decode one stored record; None if it cannot form a valid Task."""
    if not isinstance(raw, dict):
        return None

    task_id = _coerce_id(raw.get("id"))
    if task_id is None:
        return None

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        return None

    description = raw.get("description")
    created_at = parse_timestamp(raw.get("createdAt"))

    return Task(
        id=task_id,
        title=title.strip(),
        description=description.strip() if isinstance(description, str) else "",
        completed=bool(raw.get("completed", False)),
        created_at=created_at if created_at is not None else EPOCH,
    )


def deserialize_tasks(data: Any) -> list[Task]:
    """
    Decode a stored list, skipping anything that would break the list invariants
    (non-records, missing ids, empty titles, repeated ids).
    A JSON string (browser local storage form) is decoded first.
    """
    if data is None:
        return []
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError:
            logger.warning("Stored task list is a string but not valid JSON; ignoring it.")
            return []
    if not isinstance(data, list):
        logger.warning("Stored task list is %s, not a list; ignoring it.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[TaskId] = set()
    for idx, raw in enumerate(data):
        task = record_to_task(raw)
        if task is None:
            logger.warning("Skipping invalid task record #%d: %r", idx, raw)
            continue
        if task.id in seen:
            logger.warning("Skipping task record #%d with duplicate id=%r", idx, task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out
