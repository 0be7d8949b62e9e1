"""
Input validation for task store operations.

Each rule set is an ordered list of ``(field, predicate, message)`` checks.
``run_checks`` evaluates all of them and collects every violation, keeping
at most one message per field: once a field has failed, its remaining
checks are skipped, since they would only restate the same problem.
"""

import re
from collections.abc import Callable
from typing import Any

from .models import TaskStatus

TITLE_MIN_LENGTH = 5

# dev-<id>, where <id> is one or more letters or digits
ASSIGNEE_PATTERN = re.compile(r"^dev-[A-Za-z0-9]+$")

Predicate = Callable[[dict[str, Any]], bool]
Check = tuple[str, Predicate, str]

_STATUS_MESSAGE = f"status must be one of: {', '.join(TaskStatus.values())}"


def _present(field: str) -> Predicate:
    def predicate(data: dict[str, Any]) -> bool:
        value = data.get(field)
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True

    return predicate


def _string(field: str) -> Predicate:
    return lambda data: isinstance(data.get(field), str)


def _min_length(field: str, length: int) -> Predicate:
    return lambda data: len(data[field].strip()) >= length


def _one_of(field: str, choices: list[str], optional: bool = False) -> Predicate:
    def predicate(data: dict[str, Any]) -> bool:
        value = data.get(field)
        if value is None and optional:
            return True
        return isinstance(value, str) and value in choices

    return predicate


def _matches(field: str, pattern: re.Pattern) -> Predicate:
    return lambda data: pattern.fullmatch(data[field]) is not None


CREATE_CHECKS: list[Check] = [
    ("title", _present("title"), "title is required"),
    ("title", _string("title"), "title must be a string"),
    (
        "title",
        _min_length("title", TITLE_MIN_LENGTH),
        f"title must be at least {TITLE_MIN_LENGTH} characters long",
    ),
    ("status", _one_of("status", TaskStatus.values(), optional=True), _STATUS_MESSAGE),
]

ASSIGN_CHECKS: list[Check] = [
    ("assignee", _present("assignee"), "assignee is required"),
    ("assignee", _string("assignee"), "assignee must be a string"),
    (
        "assignee",
        _matches("assignee", ASSIGNEE_PATTERN),
        "assignee must match the pattern dev-<id>",
    ),
]

STATUS_CHECKS: list[Check] = [
    ("status", _present("status"), "status is required"),
    ("status", _one_of("status", TaskStatus.values()), _STATUS_MESSAGE),
]


def run_checks(checks: list[Check], data: dict[str, Any]) -> list[str]:
    """
    Evaluate validation checks against request data.

    Args:
        checks: Ordered ``(field, predicate, message)`` rules.
        data: Field values to validate.

    Returns:
        Messages for every violated field, in check order. Empty when
        the data is valid.
    """
    errors: list[str] = []
    failed_fields: set[str] = set()
    for field, predicate, message in checks:
        if field in failed_fields:
            continue
        if not predicate(data):
            failed_fields.add(field)
            errors.append(message)
    return errors
