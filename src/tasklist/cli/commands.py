# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import Session
from ..errors import InvalidPriorityError, TaskListError
from ..tasks.task_models import Priority, Task

Ask = Callable[[str], str]
CommandHandler = Callable[[Session, Ask], str]

logger = logging.getLogger(__name__)

LENIENT_PRIORITY_NOTE = "Invalid priority, setting to low."


class CommandRegistry:
    """Menu-code registry used by the console connector (1..7, plus word aliases)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        code: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = code.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, session: Session, line: str, ask: Ask) -> str:
        """
        Dispatch one menu code and return the text to show.

        Expected failures (TaskListError) are turned into their message;
        anything else propagates to the connector.
        """
        code = line.strip().lower()
        if not code:
            return "Empty command. Type help to show the menu."

        handler = self._handlers.get(code)
        if handler is None:
            logger.info("Unknown command code=%r", code)
            return f"Invalid command: {line.strip()}"

        try:
            return handler(session, ask)
        except TaskListError as e:
            logger.info("Command %s failed: %s", code, e)
            return str(e)

    def build_help(self) -> str:
        return "\n".join(f"{code}. {help_text}" for code, help_text in self._help.items())


registry = CommandRegistry()


def _ask_priority(session: Session, ask: Ask) -> tuple[Priority, str | None]:
    raw = ask("Enter task priority (low/medium/high): ")
    try:
        return Priority.parse(raw), None
    except InvalidPriorityError:
        if session.settings.strict_priority:
            raise
        logger.debug("Priority %r not recognized, falling back to Low", raw)
        return Priority.LOW, LENIENT_PRIORITY_NOTE


def _ask_task(session: Session, ask: Ask) -> tuple[Task, str | None]:
    name = ask("Enter task name: ")
    if not name:
        raise TaskListError("Task name must not be empty")
    description = ask("Enter task description: ")
    priority, note = _ask_priority(session, ask)
    return Task.new(name, description, priority), note


def _with_note(note: str | None, text: str) -> str:
    return text if note is None else f"{note}\n{text}"


def cmd_add(session: Session, ask: Ask) -> str:
    task, note = _ask_task(session, ask)
    session.repository.add(task)
    return _with_note(note, f"Task {task.name} is added")


def cmd_find(session: Session, ask: Ask) -> str:
    name = ask("Enter task name to find: ")
    task = session.repository.find(name)
    if task is None:
        return f"Task {name} not found"
    return f"Task found.\n{task.render()}"


def cmd_edit(session: Session, ask: Ask) -> str:
    name = ask("Enter task name to edit: ")
    # Fail fast before prompting for the replacement fields.
    if session.repository.find_index(name) is None:
        return f"Task {name} not found"
    replacement, note = _ask_task(session, ask)
    return _with_note(note, session.repository.edit(name, replacement))


def cmd_remove(session: Session, ask: Ask) -> str:
    name = ask("Enter task name to remove: ")
    return session.repository.remove(name)


def cmd_list(session: Session, ask: Ask) -> str:
    tasks = session.repository.list_all()
    if not tasks:
        return "No tasks."
    return "\n".join(t.render() for t in tasks)


def cmd_save(session: Session, ask: Ask) -> str:
    file_name = ask("Enter file name to store data in: ")
    if not file_name:
        return "File name must not be empty"
    return session.repository.save_to_file(file_name)


def cmd_load(session: Session, ask: Ask) -> str:
    file_name = ask("Enter file name to read data from: ")
    if not file_name:
        return "File name must not be empty"
    return session.repository.load_from_file(file_name)


registry.register("1", cmd_add, "Add task", aliases=["add"])
registry.register("2", cmd_find, "Find task", aliases=["find"])
registry.register("3", cmd_edit, "Edit task", aliases=["edit"])
registry.register("4", cmd_remove, "Remove task", aliases=["remove", "rm"])
registry.register("5", cmd_list, "Print list tasks", aliases=["list", "ls"])
registry.register("6", cmd_save, "Store tasks to file", aliases=["save"])
registry.register("7", cmd_load, "Read tasks from file", aliases=["load"])
