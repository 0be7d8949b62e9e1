"""
In-memory task collection.

``TaskStore`` is the only owner of the task records. Every operation runs
under a single re-entrant lock, so validate-then-append and
lookup-then-mutate sequences never interleave when the WSGI server handles
requests on several threads. Callers receive copies of the records, never
the stored instances.
"""

import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from .errors import NotFoundError, ValidationError
from .models import Task, TaskStatus
from .validation import ASSIGN_CHECKS, CREATE_CHECKS, STATUS_CHECKS, run_checks


def _uuid_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    Encapsulated, thread-safe collection of ``Task`` records.

    Args:
        id_factory: Callable returning a new unique id string.
        clock: Callable returning the current timezone-aware datetime.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _uuid_id,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.RLock()
        # Insertion-ordered; dicts preserve order
        self._tasks: dict[str, Task] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self, status: str | None = None) -> list[Task]:
        """
        Return all tasks, optionally only those with the given status.

        An unrecognized status simply matches nothing.
        """
        with self._lock:
            return [
                replace(task)
                for task in self._tasks.values()
                if status is None or task.status == status
            ]

    def get_task(self, task_id: str) -> Task:
        """Return the task with ``task_id`` or raise ``NotFoundError``."""
        with self._lock:
            return replace(self._get(task_id))

    def create_task(self, title: Any, status: Any = None) -> Task:
        """
        Validate and append a new task.

        Args:
            title: Task title; surrounding whitespace is trimmed.
            status: Optional initial status, defaults to ``todo``.

        Returns:
            A copy of the created task.

        Raises:
            ValidationError: Listing every violated field constraint.
        """
        errors = run_checks(CREATE_CHECKS, {"title": title, "status": status})
        if errors:
            raise ValidationError(errors)

        with self._lock:
            task_id = self._id_factory()
            if task_id in self._tasks:
                raise RuntimeError(f"id factory returned duplicate id {task_id!r}")
            now = self._clock()
            task = Task(
                id=task_id,
                title=title.strip(),
                status=status or TaskStatus.TODO.value,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task_id] = task
            return replace(task)

    def assign_task(self, task_id: str, assignee: Any) -> Task:
        """
        Delegate a task to a developer.

        The assignee is validated before the lookup, so an invalid
        assignee is reported even for an unknown id.

        Raises:
            ValidationError: If ``assignee`` does not match ``dev-<id>``.
            NotFoundError: If no task has ``task_id``.
        """
        errors = run_checks(ASSIGN_CHECKS, {"assignee": assignee})
        if errors:
            raise ValidationError(errors)

        with self._lock:
            task = self._get(task_id)
            task.assignee = assignee
            task.updated_at = self._clock()
            return replace(task)

    def update_status(self, task_id: str, status: Any) -> Task:
        """
        Move a task to another workflow stage.

        Raises:
            ValidationError: If ``status`` is missing or not recognized.
            NotFoundError: If no task has ``task_id``.
        """
        errors = run_checks(STATUS_CHECKS, {"status": status})
        if errors:
            raise ValidationError(errors)

        with self._lock:
            task = self._get(task_id)
            task.status = status
            task.updated_at = self._clock()
            return replace(task)

    def _get(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task
