# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from ..errors import InvalidPriorityError, TaskSerializationError

TIME_FORMAT = "%d-%m-%Y %H:%M:%S"


class Priority(StrEnum):
    """
    Task priority.

    The value doubles as the display label and the JSON tag, so spelling is
    part of the file format.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_tag(cls, raw: str) -> Priority:
        """Exact tag lookup (JSON boundary)."""
        return cls(raw)

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Lenient lookup for user input: case-insensitive, surrounding spaces ignored."""
        key = (raw or "").strip().lower()
        for p in cls:
            if p.value.lower() == key:
                return p
        raise InvalidPriorityError(raw)


def local_now() -> datetime:
    return datetime.now().astimezone().replace(microsecond=0)


def normalize_timestamp(value: datetime) -> datetime:
    """Aware (naive values are taken as local time), second precision."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.replace(microsecond=0)


@dataclass(slots=True)
class Task:
    name: str
    description: str
    priority: Priority
    created_at: datetime

    def __post_init__(self) -> None:
        self.created_at = normalize_timestamp(self.created_at)

    @classmethod
    def new(
        cls,
        name: str,
        description: str,
        priority: Priority,
        *,
        now: datetime | None = None,
    ) -> Task:
        created_at = local_now() if now is None else normalize_timestamp(now)
        return cls(name=name, description=description, priority=priority, created_at=created_at)

    def render(self) -> str:
        return (
            f"> {self.name} | {self.priority.value} | {self.created_at.strftime(TIME_FORMAT)}\n"
            f"/ {self.description} /"
        )

    def replace_fields(self, other: Task) -> None:
        self.name = other.name
        self.description = other.description
        self.priority = other.priority
        self.created_at = normalize_timestamp(other.created_at)

    # ---- JSON mapping ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "priority": self.priority.value,
            "add_time": normalize_timestamp(self.created_at).isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one element of a saved JSON array.

        Raises TaskSerializationError on:
        - non-object input or missing keys
        - non-string fields
        - unknown priority tag
        - timestamp that is not ISO-8601 with a UTC offset
        """
        if not isinstance(raw, dict):
            raise TaskSerializationError(f"Task entry must be an object, got {type(raw).__name__}")

        missing = [k for k in ("name", "description", "priority", "add_time") if k not in raw]
        if missing:
            raise TaskSerializationError(f"Task entry is missing keys: {', '.join(missing)}")

        for key in ("name", "description", "priority", "add_time"):
            if not isinstance(raw[key], str):
                raise TaskSerializationError(f"Task field {key!r} must be a string")

        try:
            priority = Priority.from_tag(raw["priority"])
        except ValueError:
            raise TaskSerializationError(f"Unknown priority tag: {raw['priority']!r}") from None

        try:
            created_at = datetime.fromisoformat(raw["add_time"])
        except ValueError as e:
            raise TaskSerializationError(f"Bad timestamp {raw['add_time']!r}: {e}") from None
        if created_at.tzinfo is None:
            raise TaskSerializationError(f"Timestamp {raw['add_time']!r} has no UTC offset")

        return cls(
            name=raw["name"],
            description=raw["description"],
            priority=priority,
            created_at=created_at.replace(microsecond=0),
        )
