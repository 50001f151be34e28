# src/taskbot/tasks/task_store.py

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from ..errors import InvalidFormatError, StorageError, StorageErrorKind
from .task_models import SAVE_DELIMITER, Task, from_save_record

logger = logging.getLogger(__name__)


def encode_line(task: Task) -> str:
    """One save-file line: every field followed by the delimiter."""
    return "".join(f"{field}{SAVE_DELIMITER}" for field in task.to_save_record()) + "\n"


# Only the description may contain "#" (never "###"), so it ends at the first
# delimiter followed by a non-"#" character. This keeps "learn C#" readable.
_RECORD_RE = re.compile(r"^(?P<status>[^#]*)###(?P<description>.+?)###(?P<rest>[^#].*)$")


def _split_fields(line: str) -> list[str]:
    m = _RECORD_RE.match(line)
    if m is None:
        return line.split(SAVE_DELIMITER)
    return [m["status"], m["description"], *m["rest"].split(SAVE_DELIMITER)]


def decode_line(line: str) -> Task:
    fields = _split_fields(line.rstrip("\r\n"))
    # Records end with a delimiter, which leaves one empty trailing field.
    if fields and fields[-1] == "":
        fields.pop()
    return from_save_record(fields)


class TaskStore:
    """
    Flat-file task store.

    File format: one task per line, fields joined by "###" with a trailing
    "###" (status, description, type tag, then 0-2 date fields).

    - load() is called once at startup; a single malformed line aborts it.
    - save() rewrites the whole file (temp file + os.replace).
    """

    def __init__(self, path: str | Path = "list.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            raise StorageError(StorageErrorKind.NOT_FOUND, str(self._path))

        try:
            text = self._path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise StorageError(StorageErrorKind.INVALID_FORMAT, f"{self._path} is not UTF-8 text") from e
        except OSError as e:
            raise StorageError(StorageErrorKind.NOT_FOUND, f"{self._path} ({e.strerror})") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_line(line))
            except InvalidFormatError as e:
                raise StorageError(
                    StorageErrorKind.INVALID_FORMAT, f"{self._path} line {lineno}: {e}"
                ) from e

        logger.info("TaskStore loaded path=%s total=%d", self._path, len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = "".join(encode_line(t) for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(StorageErrorKind.WRITE_FAILURE, f"{self._path} ({e})") from e
        logger.debug("TaskStore saved path=%s bytes=%d", self._path, len(payload))
