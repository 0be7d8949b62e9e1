"""
REST API endpoints for the task store.

All endpoints return JSON responses and follow REST conventions.

Endpoints:
    GET    /health                 - Health check
    GET    /tasks                  - List tasks (optional ?status= filter)
    GET    /tasks/<id>             - Get a single task by ID
    POST   /tasks                  - Create a new task
    PATCH  /tasks/<id>/assign      - Assign a task to a developer
    PATCH  /tasks/<id>/status      - Update task status only
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..errors import NotFoundError, ValidationError
from ..store import TaskStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def get_store() -> TaskStore:
    """Return the task store owned by the current application."""
    return current_app.extensions["task_store"]


def _json_body() -> dict[str, Any] | None:
    """Return the request body when it is a JSON object, otherwise None."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


def _body_required() -> tuple[Response, int]:
    return jsonify({"error": "Request body must be a JSON object"}), 400


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": current_app.config.get("ENVIRONMENT", "unknown"),
        "version": current_app.config.get("APP_VERSION", "unknown"),
    }), 200


@api_bp.route("/tasks", methods=["GET"])
def list_tasks() -> tuple[Response, int]:
    """
    List tasks in insertion order.

    Query Parameters:
        status: Only return tasks with this status (todo, in-progress, done)

    Returns:
        JSON array of tasks and 200 status code.
    """
    # A blank ?status= means no filter
    status = request.args.get("status") or None
    logger.info("GET /tasks - Listing tasks (status=%s)", status)

    tasks = get_store().list_tasks(status)
    logger.info("Found %d tasks", len(tasks))
    return jsonify([task.to_dict() for task in tasks]), 200


@api_bp.route("/tasks/<task_id>", methods=["GET"])
def get_task(task_id: str) -> tuple[Response, int]:
    """
    Get a single task by ID.

    Returns:
        JSON response with task data and 200 status code,
        or error message and 404 if not found.
    """
    logger.info("GET /tasks/%s - Fetching task", task_id)
    task = get_store().get_task(task_id)
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        title: Task title, at least 5 characters (required)
        status: Task status (optional, default: todo)

    Returns:
        JSON response with created task and 201 status code,
        or the list of field errors and 400 if validation fails.
    """
    logger.info("POST /tasks - Creating new task")

    data = _json_body()
    if data is None:
        return _body_required()

    task = get_store().create_task(data.get("title"), data.get("status"))
    logger.info("Created task with ID: %s", task.id)
    return jsonify(task.to_dict()), 201


@api_bp.route("/tasks/<task_id>/assign", methods=["PATCH"])
def assign_task(task_id: str) -> tuple[Response, int]:
    """
    Assign a task to a developer.

    Request Body (JSON):
        assignee: Developer handle matching dev-<id> (required)

    Returns:
        JSON response with updated task and 200 status code,
        400 for an invalid assignee, or 404 if the task does not exist.
    """
    logger.info("PATCH /tasks/%s/assign - Assigning task", task_id)

    data = _json_body()
    if data is None:
        return _body_required()

    task = get_store().assign_task(task_id, data.get("assignee"))
    logger.info("Assigned task %s to %s", task_id, task.assignee)
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks/<task_id>/status", methods=["PATCH"])
def update_task_status(task_id: str) -> tuple[Response, int]:
    """
    Update only the status of a task.

    Request Body (JSON):
        status: New status (todo, in-progress, done)

    Returns:
        JSON response with updated task and 200 status code,
        or error payload and 400/404 if validation or lookup fails.
    """
    logger.info("PATCH /tasks/%s/status - Updating status", task_id)

    data = _json_body()
    if data is None:
        return _body_required()

    task = get_store().update_status(task_id, data.get("status"))
    logger.info("Updated task %s status to %s", task_id, task.status)
    return jsonify(task.to_dict()), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(ValidationError)
def validation_failed(error: ValidationError) -> tuple[Response, int]:
    """Handle field validation failures raised by the store."""
    logger.warning("Validation failed: %s", error.errors)
    return jsonify({"errors": error.errors}), 400


@api_bp.errorhandler(NotFoundError)
def task_not_found(error: NotFoundError) -> tuple[Response, int]:
    """Handle lookups of unknown task ids."""
    logger.warning("Task %s not found", error.task_id)
    return jsonify({"error": "Task not found"}), 404


@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors for unmatched routes."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(HTTPException)
def http_error(error: HTTPException) -> tuple[Response, int]:
    """Render any other HTTP error (405, 415, ...) as a JSON payload."""
    return jsonify({"error": error.description}), error.code or 500


@api_bp.app_errorhandler(Exception)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle unexpected faults without leaking their details."""
    logger.exception("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
