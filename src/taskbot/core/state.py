# src/taskbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .ports import Ui


@dataclass
class AppState:
    # Settings (or a SimpleNamespace stand-in in tests).
    settings: object

    store: TaskStore
    ui: Ui
    tasks: TaskList = field(default_factory=TaskList)
