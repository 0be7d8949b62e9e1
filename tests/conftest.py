"""
Shared pytest fixtures for the Task Store test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing a fresh store and application for each test.

Key Concepts Demonstrated:
- Fixture dependencies
- Test data factories
- Injected id generator and clock for deterministic assertions
- Test client creation
"""

import itertools
import os
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from store_app import create_app
from store_app.models import Task, TaskStatus
from store_app.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


class StepClock:
    """
    Deterministic clock that advances by a fixed step on every call.

    Every timestamp handed out is strictly later than the previous one,
    which makes ``updatedAt > createdAt`` assertions reliable.
    """

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


# -----------------------------------------------------------------------------
# Store & Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def clock() -> StepClock:
    """Provide the clock injected into the store."""
    return StepClock()


@pytest.fixture
def store(clock) -> TaskStore:
    """
    Create an empty task store with sequential ids.

    Ids are ``task-1``, ``task-2``, ... in creation order.
    """
    counter = itertools.count(1)
    return TaskStore(id_factory=lambda: f"task-{next(counter)}", clock=clock)


@pytest.fixture
def app(store):
    """
    Create application instance serving the test store.

    Function scope gives every test its own store and limiter state.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", store=store)
    yield application


@pytest.fixture
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(store):
    """
    Factory fixture for creating tasks directly in the store.

    Example:
        def test_something(task_factory):
            task = task_factory(title="My Task")
            assert task.id is not None
    """

    def _create_task(
        title: str | None = None,
        status: str = TaskStatus.TODO.value,
    ) -> Task:
        """
        Create a task with the given or default values.

        Args:
            title: Task title (defaults to random sentence).
            status: Task status (defaults to todo).

        Returns:
            The created Task.
        """
        return store.create_task(title or fake.sentence(nb_words=4), status)

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single todo task for tests that just need one."""
    return task_factory(title="Sample Task")


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """
    Create tasks with statuses todo, in-progress, todo, done.

    Returns:
        List of Task instances in creation order.
    """
    return [
        task_factory(title="Write release notes", status=TaskStatus.TODO.value),
        task_factory(title="Refactor parser", status=TaskStatus.IN_PROGRESS.value),
        task_factory(title="Update dependencies", status=TaskStatus.TODO.value),
        task_factory(title="Fix login redirect", status=TaskStatus.DONE.value),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """Provide valid task data for POST requests."""
    return {
        "title": "Refactor module",
        "status": TaskStatus.IN_PROGRESS.value,
    }


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
