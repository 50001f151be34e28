# src/taskbot/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import IndexOutOfBoundsError
from .task_models import Task


class TaskList:
    """
    Ordered, mutable sequence of tasks.

    User-facing indexes are 1-based; every index-taking method validates
    before touching the list, so an out-of-range index never mutates state.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfBoundsError(index, len(self._tasks))
        return index - 1

    def add(self, task: Task) -> int:
        """Append and return the new task's 1-based index."""
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions; keeps 1-based indexes."""
        return [
            (i, t) for i, t in enumerate(self._tasks, start=1) if keyword in t.description
        ]

    def as_list(self) -> list[Task]:
        return list(self._tasks)
