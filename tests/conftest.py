# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from tasklist.config import Settings
from tasklist.core.state import Session
from tasklist.tasks.task_models import Priority, Task
from tasklist.tasks.task_repository import TaskRepository

TZ = timezone(timedelta(hours=2))


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Real Settings pointed at tmp_path.

    Built directly instead of from_env so the developer's environment and
    .env never leak into tests.
    """
    return Settings(data_dir=tmp_path / "data", log_to_file=False)


@pytest.fixture()
def session(settings: Settings) -> Session:
    return Session(settings=settings, repository=TaskRepository())


@pytest.fixture()
def repo() -> TaskRepository:
    return TaskRepository()


@pytest.fixture()
def t1() -> datetime:
    return datetime(2024, 5, 1, 9, 30, 0, tzinfo=TZ)


@pytest.fixture()
def t2() -> datetime:
    return datetime(2024, 5, 2, 18, 5, 42, tzinfo=TZ)


@pytest.fixture()
def milk(t1: datetime) -> Task:
    return Task(name="Buy milk", description="2%", priority=Priority.LOW, created_at=t1)


@pytest.fixture()
def rent(t2: datetime) -> Task:
    return Task(name="Pay rent", description="", priority=Priority.HIGH, created_at=t2)
