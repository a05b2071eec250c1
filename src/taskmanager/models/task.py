"""Task domain models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel


class TaskStatus(str, Enum):
    """Lifecycle status of a task. Any value may follow any other."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Task(BaseModel):
    """Task entity, mapped 1:1 to a row of the ``tasks`` table.

    Attributes:
        id: Server-assigned identifier, ``None`` until first persisted
        title: Short summary (1-200 characters)
        description: Optional detailed description (up to 2000 characters)
        status: Current status
        due_date: Optional target date
        created_at: UTC instant of first persist, never changed afterwards
        updated_at: UTC instant of the most recent persist
    """

    id: int | None = None
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
