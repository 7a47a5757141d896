# src/tasklist/errors.py

"""
Error types raised by the task core.

Every error carries a human-readable message; the console layer prints
str(exc) and keeps running.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all expected task list failures."""


class TaskNotFoundError(TaskListError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task {name} not found")
        self.name = name


class TaskFileExistsError(TaskListError):
    def __init__(self, path: object) -> None:
        super().__init__(f"File {path} already exists")
        self.path = path


class TaskFileMissingError(TaskListError):
    def __init__(self, path: object) -> None:
        super().__init__(f"File {path} does not exist")
        self.path = path


class TaskStorageError(TaskListError):
    """File create/open/read/write failed."""


class TaskSerializationError(TaskListError):
    """Task data could not be encoded to or decoded from JSON."""


class InvalidPriorityError(TaskListError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid priority: {raw!r} (expected low, medium or high)")
        self.raw = raw
