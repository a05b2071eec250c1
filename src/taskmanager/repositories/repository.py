"""Repository abstraction layer for Task Manager.

Defines the abstract base class (interface) for task persistence, following
the Ports & Adapters pattern. The service layer depends only on this
contract; :mod:`taskmanager.adapters.sqlite` provides the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date

from taskmanager.models import Task, TaskStatus


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert a new task or overwrite an existing one.

        A task whose ``id`` is ``None`` is inserted and receives a generated
        id; ``created_at`` and ``updated_at`` are both set to the same
        instant. Otherwise the row is updated in place, ``created_at`` is kept
        and ``updated_at`` is refreshed.

        Args:
            task: Task to persist

        Returns:
            The persisted task with id and timestamps populated

        Raises:
            StorageError: If the store rejects the row
        """

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        """Get a task by ID, or ``None`` when it does not exist."""

    @abstractmethod
    def find_all(self) -> list[Task]:
        """List every task in storage order."""

    @abstractmethod
    def delete(self, task: Task) -> None:
        """Remove a persisted task."""

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        """List tasks with the given status."""

    @abstractmethod
    def find_by_due_date_before(self, before: date) -> list[Task]:
        """List tasks whose due date is set and strictly earlier than *before*."""

    @abstractmethod
    def find_by_due_date_between(self, start: date, end: date) -> list[Task]:
        """List tasks whose due date lies in ``[start, end]``."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Unit of work: commit on normal exit, roll back on exception."""


__all__ = ["TaskRepository"]
