# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings once (injectable for tests),
- builds the Session that owns the task repository,
- optionally preloads tasks from the configured autoload file.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import Session
from ..errors import TaskListError
from ..tasks.task_repository import TaskRepository

logger = logging.getLogger(__name__)


def create_session(*, settings: Settings | None = None) -> Session:
    """
    Create a Session from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    session = Session(settings=settings, repository=TaskRepository())
    autoload(session)
    return session


def autoload(session: Session) -> bool:
    """Load settings.autoload_path if it exists. Failures are logged, not raised."""
    path = session.settings.autoload_path
    if path is None:
        return False
    if not path.exists():
        logger.info("Autoload file %s not found; starting empty.", path)
        return False
    try:
        msg = session.repository.load_from_file(path)
    except TaskListError as e:
        logger.warning("Autoload from %s failed: %s", path, e)
        return False
    logger.info("Autoload: %s", msg)
    return True
