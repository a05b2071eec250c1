"""Request validation for the task endpoints.

Validation runs before anything reaches the service layer and reports
failures as (field, message) pairs in field order.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from taskmanager.exceptions import BadRequestError, FieldError, RequestValidationError
from taskmanager.models import TaskRequest, TaskStatus
from taskmanager.models.dto import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_STATUS_CHOICES = ", ".join(TaskStatus.values())
_BODY_KEYS = ("title", "description", "status", "dueDate")


def _parse_iso_date(value: Any) -> date | None:
    """Parse ``YYYY-MM-DD`` strictly; ``None`` when *value* is not such a date."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def validate_task_request(payload: Mapping[str, Any]) -> list[FieldError]:
    """Check a task request body against the declared field constraints.

    Returns:
        Failed constraints in field order; empty when the body is valid
    """
    errors: list[FieldError] = []

    title = payload.get("title")
    if title is None:
        errors.append(FieldError("title", "Title is required"))
    elif not isinstance(title, str):
        errors.append(FieldError("title", "Title must be a string"))
    elif not title.strip():
        errors.append(FieldError("title", "Title must not be blank"))
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(
            FieldError("title", f"Title must be at most {TITLE_MAX_LENGTH} characters")
        )

    description = payload.get("description")
    if description is not None:
        if not isinstance(description, str):
            errors.append(FieldError("description", "Description must be a string"))
        elif len(description) > DESCRIPTION_MAX_LENGTH:
            errors.append(
                FieldError(
                    "description",
                    f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                )
            )

    status = payload.get("status")
    if status is None:
        errors.append(FieldError("status", "Status is required"))
    elif status not in TaskStatus.values():
        errors.append(FieldError("status", f"Status must be one of: {_STATUS_CHOICES}"))

    due_date = payload.get("dueDate")
    if due_date is not None and _parse_iso_date(due_date) is None:
        errors.append(
            FieldError("dueDate", "Due date must be a valid date in YYYY-MM-DD format")
        )

    return errors


def parse_task_request(payload: Any) -> TaskRequest:
    """Validate a decoded JSON body and build the request model.

    Raises:
        BadRequestError: If the body is not a JSON object
        RequestValidationError: If any field constraint fails
    """
    if not isinstance(payload, Mapping):
        raise BadRequestError("Request body must be a JSON object")
    errors = validate_task_request(payload)
    if errors:
        raise RequestValidationError(errors)
    # Only the checked camelCase keys reach the model
    fields = {key: payload[key] for key in _BODY_KEYS if key in payload}
    return TaskRequest.model_validate(fields)


def parse_task_filters(args: Mapping[str, str]) -> dict[str, Any]:
    """Validate the optional query parameters of ``GET /tasks``.

    Returns:
        Keyword arguments for :meth:`TaskService.find_tasks`

    Raises:
        RequestValidationError: If a parameter is malformed or a range is open
    """
    errors: list[FieldError] = []
    filters: dict[str, Any] = {}

    status = args.get("status")
    if status is not None:
        if status in TaskStatus.values():
            filters["status"] = TaskStatus(status)
        else:
            errors.append(
                FieldError("status", f"Status must be one of: {_STATUS_CHOICES}")
            )

    for param, key in (("dueBefore", "due_before"), ("dueFrom", "due_from"), ("dueTo", "due_to")):
        raw = args.get(param)
        if raw is None:
            continue
        parsed = _parse_iso_date(raw)
        if parsed is None:
            errors.append(FieldError(param, f"{param} must be a date in YYYY-MM-DD format"))
        else:
            filters[key] = parsed

    if "dueFrom" in args and "dueTo" not in args:
        errors.append(FieldError("dueTo", "dueTo is required when dueFrom is given"))
    elif "dueTo" in args and "dueFrom" not in args:
        errors.append(FieldError("dueFrom", "dueFrom is required when dueTo is given"))

    if errors:
        raise RequestValidationError(errors)
    return filters
