"""Wire models for the REST surface.

JSON bodies use camelCase keys (``dueDate``, ``createdAt``) while the Python
attributes stay snake_case.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from taskmanager.models.task import TaskStatus

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000


class TaskRequest(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}.

    Server-managed fields (id, createdAt, updatedAt) are not part of the
    request and are ignored when a client sends them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus
    due_date: date | None = None


def format_instant(value: datetime) -> str:
    """Render an instant as ISO 8601 UTC text with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


class TaskResponse(BaseModel):
    """Task representation returned by every task endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _serialize_instant(self, value: datetime) -> str:
        return format_instant(value)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Uniform error body."""

    message: str
    code: str
    field: str | None = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json")
