# src/tasklist/storage/json_slot.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.ports import TaskRecord

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The slot file exists but cannot be read or parsed."""


class JsonSlotStorage:
    """
    Local key-value storage backed by one JSON object file.

    The file maps slot keys to values; this adapter owns exactly one key
    (default "todos") and leaves any other keys in the file untouched.

    Writes are atomic: the whole file is written to a sibling .tmp and then
    moved over the original with os.replace.
    """

    def __init__(self, path: str | Path, key: str = "todos") -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    @property
    def key(self) -> str:
        return self._key

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self._path} does not hold a JSON object")
        return data

    # ---- PersistenceAdapter ----

    def load(self) -> list[TaskRecord] | None:
        value = self._read_all().get(self._key)
        if value is None:
            logger.debug("Slot %r empty in %s", self._key, self._path)
            return None
        logger.debug("Slot %r loaded from %s", self._key, self._path)
        return value

    def save(self, records: list[TaskRecord]) -> None:
        try:
            data = self._read_all()
        except StorageError:
            # The slot is overwritten anyway; unreadable siblings are lost.
            logger.warning("Overwriting unreadable storage file %s", self._path)
            data = {}

        data[self._key] = records

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except Exception:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Slot %r saved: %d records to %s", self._key, len(records), self._path)
