"""HTTP routes for the task resource and the health check."""

from __future__ import annotations

import sqlite3

from flask import Blueprint, jsonify, request

from taskmanager.exceptions import BadRequestError
from taskmanager.utils.logger import get_logger
from taskmanager.web.db import get_db, get_task_service
from taskmanager.web.mapper import to_entity, to_response
from taskmanager.web.validation import parse_task_filters, parse_task_request

logger = get_logger(__name__)

tasks_bp = Blueprint("tasks", __name__)
health_bp = Blueprint("health", __name__)


def _parse_task_id(raw: str) -> int:
    try:
        task_id = int(raw)
    except ValueError:
        raise BadRequestError(f"Invalid task id: {raw}") from None
    # SQLite INTEGER is a signed 64-bit value
    if not -(2**63) <= task_id < 2**63:
        raise BadRequestError(f"Invalid task id: {raw}")
    return task_id


def _json_body():
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        raise BadRequestError("Request body must be valid JSON")
    return payload


@tasks_bp.get("/tasks")
def get_all_tasks():
    """GET /tasks - list tasks, optionally through one derived filter."""
    filters = parse_task_filters(request.args)
    logger.debug("REST request to get tasks, filters: %s", filters)
    tasks = get_task_service().find_tasks(**filters)
    return jsonify([to_response(task).to_json() for task in tasks]), 200


@tasks_bp.post("/tasks")
def create_task():
    """POST /tasks - create a task, 201 with the stored representation."""
    task_request = parse_task_request(_json_body())
    logger.debug("REST request to create task: %s", task_request)
    created = get_task_service().create_task(to_entity(task_request))
    return jsonify(to_response(created).to_json()), 201


@tasks_bp.get("/tasks/<task_id>")
def get_task_by_id(task_id: str):
    logger.debug("REST request to get task: %s", task_id)
    task = get_task_service().get_task_by_id(_parse_task_id(task_id))
    return jsonify(to_response(task).to_json()), 200


@tasks_bp.put("/tasks/<task_id>")
def update_task(task_id: str):
    """PUT /tasks/{id} - full replace of the mutable fields."""
    parsed_id = _parse_task_id(task_id)
    task_request = parse_task_request(_json_body())
    logger.debug("REST request to update task: %s", parsed_id)
    updated = get_task_service().update_task(parsed_id, to_entity(task_request))
    return jsonify(to_response(updated).to_json()), 200


@tasks_bp.delete("/tasks/<task_id>")
def delete_task(task_id: str):
    logger.debug("REST request to delete task: %s", task_id)
    get_task_service().delete_task(_parse_task_id(task_id))
    return "", 204


@health_bp.get("/health")
def health():
    """Liveness plus a trivial database round trip."""
    try:
        get_db().execute("SELECT 1").fetchone()
    except sqlite3.Error as e:
        logger.error("health check failed: %s", e)
        return jsonify({"status": "DOWN", "database": "DOWN"}), 503
    return jsonify({"status": "UP", "database": "UP"}), 200
