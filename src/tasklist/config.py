# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing written to disk at import time.
- Every value has a usable default, so a bare checkout just runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

_TABS = ("all", "active", "completed")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default)
    for choice in choices:
        if raw.lower() == choice.lower():
            return choice
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Storage slot / presentation ----
    storage_key: str
    default_tab: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist")
        log_level = _env_choice(_k("LOG_LEVEL"), _LOG_LEVELS, "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")

        storage_key = _env(_k("STORAGE_KEY"), "todos")
        default_tab = _env_choice(_k("DEFAULT_TAB"), _TABS, "all")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            storage_key=storage_key,
            default_tab=default_tab,
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
