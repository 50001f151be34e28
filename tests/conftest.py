# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbot.core.state import AppState
from taskbot.tasks.task_list import TaskList
from taskbot.tasks.task_store import TaskStore

from .fakes import FakeUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Barney",
        log_level="WARNING",
        data_dir=tmp_path,
        log_dir=tmp_path / "logs",
        save_path=tmp_path / "list.txt",
    )


@pytest.fixture()
def ui() -> FakeUi:
    return FakeUi()


@pytest.fixture()
def state(settings: SimpleNamespace, ui: FakeUi) -> AppState:
    """AppState wired with a real TaskStore on tmp_path and a recording UI."""
    return AppState(
        settings=settings,
        store=TaskStore(settings.save_path),
        ui=ui,
        tasks=TaskList(),
    )
