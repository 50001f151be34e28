# src/taskbot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the TaskStore and the UI into AppState,
- performs the one-time startup load (never fatal).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_connector import ConsoleUi
from ..core.ports import Ui
from ..core.state import AppState
from ..errors import StorageError, StorageErrorKind
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    save_path: str | Path | None = None,
    settings=None,
    ui: Ui | None = None,
) -> AppState:
    """
    Create AppState with an empty task list.

    save_path overrides settings.save_path (the CLI positional argument).
    """
    if settings is None:
        settings = get_settings()

    path = Path(save_path) if save_path is not None else Path(settings.save_path)

    return AppState(
        settings=settings,
        store=TaskStore(path),
        ui=ui if ui is not None else ConsoleUi(),
    )


def load_tasks(state: AppState) -> TaskList:
    """
    Load the save file into state.tasks.

    Any failure leaves an empty list: a missing file gets a notice, a corrupt
    one gets an error message. Startup must not crash.
    """
    ui = state.ui
    try:
        tasks = state.store.load()
    except StorageError as e:
        if e.kind is StorageErrorKind.NOT_FOUND:
            logger.info("No save file at %s; starting empty.", state.store.path)
            ui.show(f"No saved tasks found at {state.store.path}. Starting with an empty list.")
        else:
            logger.warning("Could not load %s: %s", state.store.path, e)
            ui.show_error(f"I couldn't read your saved tasks ({e}). Starting with an empty list.")
        state.tasks = TaskList()
        return state.tasks
    except Exception:
        logger.exception("Unexpected failure loading %s", state.store.path)
        ui.show_error("An unknown error occurred while loading your tasks. Starting with an empty list.")
        state.tasks = TaskList()
        return state.tasks

    state.tasks = TaskList(tasks)
    if tasks:
        ui.show(
            f"Loaded {len(tasks)} {'task' if len(tasks) == 1 else 'tasks'} from {state.store.path}:",
            *(f"{i}. {t.to_display()}" for i, t in enumerate(tasks, start=1)),
        )
    else:
        ui.show(f"Your saved list at {state.store.path} is empty.")
    return state.tasks
