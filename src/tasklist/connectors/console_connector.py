# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_from_text
from ..cli.commands import registry as command_registry
from ..cli.render import render_board
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One user intent -> one reply.

    Slash commands go through the registry; anything else is a new task title.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is None:
            reply = add_from_text(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    return reply


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))

    write(f"[{app_name}] Type a title to add a task. Use /help for commands, /exit to quit.\n")
    write(render_board(state))

    while True:
        try:
            line = read("\n>>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, line)
        if reply:
            write(reply)

    logger.info("Console connector finished.")
