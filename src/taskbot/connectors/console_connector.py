# src/taskbot/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from ..cli.commands import parse_command
from ..core.state import AppState
from ..errors import ChatError, StorageError, UnknownError

logger = logging.getLogger(__name__)

PROMPT = ">>> "
SEPARATOR = "-" * 60


class ConsoleUi:
    """Plain stdout implementation of the Ui port."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _print(self, text: str) -> None:
        print(text, file=self._out or sys.stdout, flush=True)

    def show(self, *lines: str) -> None:
        for line in lines:
            self._print(f"    {line}")

    def show_error(self, message: str) -> None:
        self._print(f"    OOPS! {message}")


def handle_line(state: AppState, line: str) -> bool:
    """
    Parse and execute one non-blank input line.

    This is the single dispatch boundary: every error is reported through the
    UI and the session continues. Returns False only when the user said bye.
    """
    try:
        command = parse_command(line)
        return command.execute(state.tasks, state.ui)
    except ChatError as e:
        logger.debug("Chat error for %r: %s", line, e)
        state.ui.show_error(str(e))
    except Exception as e:
        err = UnknownError(f"An unknown error occurred. Please try again. ({e})")
        logger.exception("Command crashed for input %r", line)
        state.ui.show_error(str(err))
    return True


def save_tasks(state: AppState) -> bool:
    """Rewrite the save file; report (never raise) storage errors."""
    try:
        state.store.save(state.tasks)
        return True
    except StorageError as e:
        logger.error("Failed to save tasks: %s", e)
        state.ui.show_error(f"I couldn't save your tasks ({e}).")
        return False


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    app_name = str(getattr(state.settings, "app_name", "Barney"))
    logger.info("Console connector started (save_path=%s).", state.store.path)

    state.ui.show(SEPARATOR, f"Hello! I'm {app_name}.", "What can I do for you? (type 'help' for commands)", SEPARATOR)

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            save_tasks(state)
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            save_tasks(state)
            break

        if not line.strip():
            continue

        keep_chatting = handle_line(state, line)
        save_tasks(state)

        if not keep_chatting:
            logger.info("Console exit command received.")
            break

    state.ui.show(SEPARATOR, "Bye. Hope to see you again soon!", SEPARATOR)
    logger.info("Console connector finished.")
