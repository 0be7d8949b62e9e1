"""Exceptions raised by the task store."""


class TaskStoreError(Exception):
    """Base class for failures reported by ``TaskStore`` operations."""


class ValidationError(TaskStoreError):
    """One or more field constraints were violated."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class NotFoundError(TaskStoreError):
    """No task exists with the requested id."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
