# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import Settings
from ..tasks.task_repository import TaskRepository


@dataclass
class Session:
    # One session owns one repository; it is passed explicitly, never global.
    settings: Settings
    repository: TaskRepository = field(default_factory=TaskRepository)
