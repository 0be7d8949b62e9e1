"""
Domain models for the Task Store service.

Tasks live in process memory only, so the model is a plain dataclass
rather than a mapped table. ``to_dict`` produces the JSON shape returned
by the API.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Enumeration of possible task statuses."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw status strings in declaration order."""
        return [status.value for status in cls]


@dataclass
class Task:
    """
    Task record representing a unit of work.

    Attributes:
        id: Unique identifier generated by the store.
        title: Trimmed title, at least five characters long.
        status: Current workflow stage (todo, in-progress, done).
        created_at: Timestamp when the task was created.
        updated_at: Timestamp when the task was last modified.
        assignee: Developer handle (``dev-<id>``) or None.
    """

    id: str
    title: str
    status: str
    created_at: datetime
    updated_at: datetime
    assignee: str | None = None

    @staticmethod
    def _to_utc_iso(value: datetime) -> str:
        """
        Convert datetime to an ISO-8601 UTC string.

        Naive values are assumed to already be in UTC.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        return value.isoformat()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary containing all task fields.
        """
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "assignee": self.assignee,
            "createdAt": self._to_utc_iso(self.created_at),
            "updatedAt": self._to_utc_iso(self.updated_at),
        }

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.title}>"
