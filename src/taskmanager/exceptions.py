"""Exception types shared across the service, storage and HTTP layers."""

from __future__ import annotations

from dataclasses import dataclass


class TaskManagerError(Exception):
    """Base class for all application errors."""


class TaskNotFoundError(TaskManagerError):
    """Raised when no task exists for the requested identifier."""

    def __init__(self, task_id: int):
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id


@dataclass(frozen=True)
class FieldError:
    """A single failed field constraint."""

    field: str
    message: str


class RequestValidationError(TaskManagerError):
    """Raised when request input fails declared field constraints.

    Attributes:
        errors: Failed constraints in field order. The first one is reported
            to the caller.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(first.message if first else "Validation failed")

    @property
    def field(self) -> str | None:
        return self.errors[0].field if self.errors else None


class BadRequestError(TaskManagerError):
    """Raised when a request cannot be interpreted at all (e.g. malformed body)."""


class StorageError(TaskManagerError):
    """Raised when the store rejects an operation (constraint violation, I/O)."""
