# src/taskbot/tasks/task_models.py

"""
Task record and its save-record codec.

A task is one dataclass tagged with a TaskKind instead of a class per variant:
the set of variants is closed (T/D/E) and every capability (mark, display,
serialize) switches on the tag.

Date/time policy:
- accepted text is "YYYY-MM-DD" or "YYYY-MM-DD HH:MM" (24h),
- a date parses to datetime.date, a date with time to datetime.datetime,
- the same format is used for display and for the save file, so values
  round-trip byte-for-byte.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import StrEnum

from ..errors import InvalidFormatError, TaskbotError, ValidationError

SAVE_DELIMITER = "###"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"
_WHEN_RE = re.compile(r"^\d{4}-\d{2}-\d{2}( \d{2}:\d{2})?$")

When = date | datetime


class TaskKind(StrEnum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def extra_fields(self) -> int:
        """How many date fields follow the type tag in a save record."""
        return _EXTRA_FIELDS[self]


_EXTRA_FIELDS = {TaskKind.TODO: 0, TaskKind.DEADLINE: 1, TaskKind.EVENT: 2}


def parse_when(raw: str) -> When:
    """Parse a date or date+time in the fixed format; raise ValueError otherwise."""
    s = (raw or "").strip()
    if not _WHEN_RE.match(s):
        raise ValueError(f"'{raw}' is not a date like 2024-12-01 or 2024-12-01 18:00")
    if " " in s:
        return datetime.strptime(s, DATETIME_FORMAT)
    return datetime.strptime(s, DATE_FORMAT).date()


def format_when(value: When) -> str:
    # datetime is a subclass of date: check it first.
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    return value.strftime(DATE_FORMAT)


def _as_datetime(value: When) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    done: bool = False

    by: When | None = None
    start: When | None = None
    end: When | None = None

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    def _extras(self) -> list[When]:
        if self.kind is TaskKind.DEADLINE:
            if self.by is None:
                raise InvalidFormatError("A deadline task has no 'by' date.")
            return [self.by]
        if self.kind is TaskKind.EVENT:
            if self.start is None or self.end is None:
                raise InvalidFormatError("An event task needs both a start and an end.")
            return [self.start, self.end]
        return []

    def to_display(self) -> str:
        box = "X" if self.done else " "
        text = f"[{self.kind}][{box}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            text += f" (by: {format_when(self.by)})"  # type: ignore[arg-type]
        elif self.kind is TaskKind.EVENT:
            text += f" (from: {format_when(self.start)} to: {format_when(self.end)})"  # type: ignore[arg-type]
        return text

    def to_save_record(self) -> tuple[str, ...]:
        return (
            "1" if self.done else "0",
            self.description,
            self.kind.value,
            *(format_when(v) for v in self._extras()),
        )


def _build(
    kind: TaskKind,
    description: str,
    extras: list[str],
    error_cls: type[TaskbotError],
) -> Task:
    """Shared constructor for user input and save records; raises error_cls on bad data."""
    description = (description or "").strip()
    if not description:
        raise error_cls("The description of a task cannot be empty.")
    if SAVE_DELIMITER in description:
        raise error_cls(f"The description cannot contain '{SAVE_DELIMITER}'.")

    if len(extras) != kind.extra_fields:
        raise error_cls(
            f"A '{kind.value}' task needs {kind.extra_fields} date field(s), got {len(extras)}."
        )

    try:
        values = [parse_when(raw) for raw in extras]
    except ValueError as e:
        raise error_cls(str(e)) from e

    if kind is TaskKind.DEADLINE:
        return Task(kind=kind, description=description, by=values[0])

    if kind is TaskKind.EVENT:
        start, end = values
        if _as_datetime(end) < _as_datetime(start):
            raise error_cls(
                f"An event cannot end ({format_when(end)}) before it starts ({format_when(start)})."
            )
        return Task(kind=kind, description=description, start=start, end=end)

    return Task(kind=kind, description=description)


def create_task(kind: TaskKind, description: str, *extra: str) -> Task:
    """Build a new (undone) task from user input. Raises ValidationError."""
    return _build(kind, description, list(extra), ValidationError)


def from_save_record(fields: list[str] | tuple[str, ...]) -> Task:
    """Inverse of Task.to_save_record(). Raises InvalidFormatError."""
    if len(fields) < 3:
        raise InvalidFormatError(f"Record has {len(fields)} field(s), expected at least 3.")

    status, description, tag, *extras = fields

    try:
        kind = TaskKind(tag)
    except ValueError:
        raise InvalidFormatError(f"Invalid task type: {tag!r}") from None

    if status not in ("0", "1"):
        raise InvalidFormatError(f"Invalid task status: {status!r}")

    task = _build(kind, description, extras, InvalidFormatError)
    if status == "1":
        task.mark()
    return task
