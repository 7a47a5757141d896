# src/tasklist/tasks/task_repository.py

from __future__ import annotations

import contextlib
import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..errors import (
    TaskFileExistsError,
    TaskFileMissingError,
    TaskNotFoundError,
    TaskSerializationError,
    TaskStorageError,
)
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Ordered in-memory task list with whole-file JSON persistence.

    Notes:
    - insertion order is display order
    - names are lookup keys but not unique; lookups return the first match
    - save is create-only, load replaces everything
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- CRUD ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added name=%s total=%d", task.name, len(self._tasks))

    def find_index(self, name: str) -> int | None:
        for idx, task in enumerate(self._tasks):
            if task.name == name:
                return idx
        return None

    def find(self, name: str) -> Task | None:
        idx = self.find_index(name)
        return None if idx is None else self._tasks[idx]

    def edit(self, name: str, replacement: Task) -> str:
        idx = self.find_index(name)
        if idx is None:
            raise TaskNotFoundError(name)
        self._tasks[idx].replace_fields(replacement)
        logger.debug("Task edited name=%s new_name=%s pos=%d", name, replacement.name, idx)
        return f"Task {name} is edited"

    def remove(self, name: str) -> str:
        idx = self.find_index(name)
        if idx is None:
            raise TaskNotFoundError(name)
        del self._tasks[idx]
        logger.debug("Task removed name=%s pos=%d", name, idx)
        return f"Task {name} is removed"

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    # ---- persistence ----

    def save_to_file(self, path: str | Path) -> str:
        path = Path(path)
        if path.exists():
            raise TaskFileExistsError(path)

        # Encode before creating anything so a bad task never leaves a file behind.
        try:
            payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise TaskSerializationError(f"Error saving data: {e}") from e

        try:
            with path.open("xb") as f:
                f.write(payload)
        except FileExistsError:
            raise TaskFileExistsError(path) from None
        except OSError as e:
            with contextlib.suppress(OSError):
                path.unlink()
            raise TaskStorageError(f"Error writing file {path}: {e}") from e

        logger.info("Saved %d tasks to %s", len(self._tasks), path)
        return f"Tasks saved to {path}"

    def load_from_file(self, path: str | Path) -> str:
        path = Path(path)
        if not path.exists():
            raise TaskFileMissingError(path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise TaskStorageError(f"Error reading file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise TaskSerializationError(f"Error reading data: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TaskSerializationError(f"Error reading data: {e}") from e

        if not isinstance(data, list):
            raise TaskSerializationError(
                f"Error reading data: expected a JSON array, got {type(data).__name__}"
            )

        loaded = [Task.from_dict(item) for item in data]

        self._tasks = loaded
        logger.info("Loaded %d tasks from %s", len(loaded), path)
        return f"Loaded {len(loaded)} tasks from {path}"
