# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is read at runtime.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level: DEBUG/INFO/WARNING/ERROR (default: INFO).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for tasks and logs (default: .local/tasklist).",
    "TASKLIST_TASKS_PATH": "Task storage JSON file (default: <data_dir>/tasks.json).",
    # Storage / presentation
    "TASKLIST_STORAGE_KEY": "Slot key inside the storage file (default: todos).",
    "TASKLIST_DEFAULT_TAB": "Tab shown at startup: all/active/completed (default: all).",
}
