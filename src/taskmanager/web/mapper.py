"""Conversions between the wire models and the Task entity."""

from __future__ import annotations

from taskmanager.models import Task, TaskRequest, TaskResponse


def to_entity(request: TaskRequest) -> Task:
    """Build an unsaved Task from a request; id and timestamps stay unset."""
    return Task(
        title=request.title,
        description=request.description,
        status=request.status,
        due_date=request.due_date,
    )


def to_response(task: Task) -> TaskResponse:
    """Build the response body of a persisted Task."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        due_date=task.due_date,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )
