# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Editing, TaskId, TaskTab
from .render import render_board

CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Handlers get the split args plus the raw text after the command name.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, _, text = line[1:].partition(" ")
        name = head.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        text = text.strip()
        args = text.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (no leading /) adds a task with that title.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _board(state: AppState, note: str | None = None) -> str:
    board = render_board(state)
    return f"{note}\n\n{board}" if note else board


def _split_title(text: str) -> tuple[str, str]:
    """'title | description' -> (title, description)."""
    title, _, description = text.partition("|")
    return title.strip(), description.strip()


def _resolve_id(state: AppState, raw: str) -> TaskId | None:
    """Map user input to the id of an existing task (stored ids may be int or str)."""
    raw = raw.strip().rstrip(".")
    if not raw:
        return None
    candidates: list[TaskId] = []
    if raw.isdigit():
        candidates.append(int(raw))
    candidates.append(raw)
    for candidate in candidates:
        if state.store.get(candidate) is not None:
            return candidate
    return None


def add_from_text(state: AppState, text: str) -> str:
    title, description = _split_title(text)
    task = state.store.add(title, description)
    if task is None:
        return "Title required. Usage: /add <title> [| <description>]"
    return _board(state, f"Added {task.id}.")


# ---- commands ----


def cmd_help(state: AppState, args: list[str], text: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], text: str) -> str:
    settings = state.settings
    counts = state.store.counts()
    path = getattr(settings, "tasks_path", "?")
    key = getattr(settings, "storage_key", "todos")
    return (
        "Status:\n"
        f"  App: {getattr(settings, 'app_name', 'tasklist')}\n"
        f"  Storage: {path} (slot {key!r})\n"
        f"  Tasks: {counts[TaskTab.ALL]} total, {counts[TaskTab.ACTIVE]} to do, "
        f"{counts[TaskTab.COMPLETED]} completed\n"
        f"  Tab: {state.tab.label}\n"
        f"  Search: {state.search_term or '(none)'}"
    )


def cmd_list(state: AppState, args: list[str], text: str) -> str:
    return _board(state)


def cmd_add(state: AppState, args: list[str], text: str) -> str:
    return add_from_text(state, text)


def cmd_done(state: AppState, args: list[str], text: str) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task_id = _resolve_id(state, args[0])
    task = state.store.toggle_complete(task_id) if task_id is not None else None
    if task is None:
        return f"Task {args[0]} not found."
    verb = "completed" if task.completed else "reopened"
    return _board(state, f"Task {task.id} {verb}.")


def cmd_rm(state: AppState, args: list[str], text: str) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"
    task_id = _resolve_id(state, args[0])
    if task_id is None or not state.store.delete(task_id):
        return f"Task {args[0]} not found."
    return _board(state, f"Task {task_id} removed.")


def cmd_edit(state: AppState, args: list[str], text: str) -> str:
    """
    /edit <id>                          -> open the edit buffers
    /edit <id> <title> [| <desc>]       -> open, fill and save in one go
    """
    if not args:
        return "Usage: /edit <id> [<title> [| <description>]]"

    task_id = _resolve_id(state, args[0])
    task = state.store.get(task_id) if task_id is not None else None
    if task is None:
        return f"Task {args[0]} not found."
    if task.completed:
        return f"Task {task.id} is completed; reopen it with /done {task.id} to edit."

    state.store.start_edit(task.id)

    rest = text[len(args[0]) :].strip()
    if not rest:
        return _board(state)

    title, description = _split_title(rest)
    state.store.update_edit(title=title, description=description)
    return _save_edit(state)


def cmd_title(state: AppState, args: list[str], text: str) -> str:
    if not state.store.update_edit(title=text):
        return "Not editing. Use /edit <id> first."
    return _board(state)


def cmd_desc(state: AppState, args: list[str], text: str) -> str:
    if not state.store.update_edit(description=text):
        return "Not editing. Use /edit <id> first."
    return _board(state)


def _save_edit(state: AppState) -> str:
    edit = state.store.edit_state
    if not isinstance(edit, Editing):
        return "Not editing. Use /edit <id> first."
    task = state.store.commit_edit()
    if task is None and isinstance(state.store.edit_state, Editing):
        return "Title required. Use /title <text>, or /cancel."
    return _board(state, f"Task {edit.task_id} saved." if task else None)


def cmd_save(state: AppState, args: list[str], text: str) -> str:
    return _save_edit(state)


def cmd_cancel(state: AppState, args: list[str], text: str) -> str:
    if not isinstance(state.store.edit_state, Editing):
        return "Not editing."
    state.store.cancel_edit()
    return _board(state, "Edit cancelled.")


def cmd_tab(state: AppState, args: list[str], text: str) -> str:
    if not args:
        return "Usage: /tab all | active | completed"
    state.tab = TaskTab.parse(args[0])
    return _board(state)


def cmd_search(state: AppState, args: list[str], text: str) -> str:
    state.search_term = text
    return _board(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage location and task counts.")
registry.register("list", cmd_list, help_text="Show the board.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| <description>].")
registry.register(
    "done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle", "x"]
)
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del", "delete"])
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> [<title> [| <description>]]."
)
registry.register("title", cmd_title, help_text="Set the title being edited: /title <text>.")
registry.register("desc", cmd_desc, help_text="Set the description being edited: /desc [text].")
registry.register("save", cmd_save, help_text="Save the current edit.")
registry.register("cancel", cmd_cancel, help_text="Discard the current edit.")
registry.register(
    "tab", cmd_tab, help_text="Filter by status: /tab all | active | completed."
)
registry.register("search", cmd_search, help_text="Search title/description: /search [term].")
