# src/taskbot/errors.py

"""
Error taxonomy.

Chat errors are user-input mistakes: the console loop reports them and keeps
prompting. Storage errors are file/format problems raised by TaskStore.
"""

from __future__ import annotations

from enum import StrEnum


class TaskbotError(Exception):
    """Base class for every error raised by taskbot."""


class ChatError(TaskbotError):
    """User typed something we cannot act on."""


class ValidationError(ChatError):
    """Bad task construction arguments (empty description, bad date...)."""


class UnknownCommandError(ChatError):
    def __init__(self, keyword: str) -> None:
        super().__init__(f"I don't know the command '{keyword}'. Type 'help' to see what I can do.")
        self.keyword = keyword


class MissingArgumentError(ChatError):
    """A required argument or marker (/by, /from, /to) is absent."""


class InvalidArgumentError(ChatError):
    """An argument is present but malformed (e.g. non-numeric index)."""


class IndexOutOfBoundsError(ChatError):
    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            msg = f"There is no task {index}: the list is empty."
        else:
            msg = f"There is no task {index}: pick a number from 1 to {size}."
        super().__init__(msg)
        self.index = index
        self.size = size


class InvalidFormatError(TaskbotError):
    """A save record cannot be decoded into a task."""


class StorageErrorKind(StrEnum):
    NOT_FOUND = "not found"
    INVALID_FORMAT = "invalid format"
    WRITE_FAILURE = "write failure"


class StorageError(TaskbotError):
    def __init__(self, kind: StorageErrorKind, detail: str) -> None:
        super().__init__(f"{kind}: {detail}")
        self.kind = kind
        self.detail = detail


class UnknownError(TaskbotError):
    """Wraps anything unanticipated that escaped a command."""
