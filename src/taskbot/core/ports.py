# src/taskbot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands talk to a Ui Protocol instead of printing directly, so the console
connector can be swapped for a recording fake in tests.
"""

from typing import Protocol


class Ui(Protocol):
    """User-facing output primitives."""

    def show(self, *lines: str) -> None: ...

    def show_error(self, message: str) -> None: ...
