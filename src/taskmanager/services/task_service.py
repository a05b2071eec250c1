"""Task service - Business logic for task operations.

This service layer sits between the HTTP routes and the repository. It owns
the not-found policy and the unit-of-work boundary of every mutation.
"""

from __future__ import annotations

from datetime import date

from taskmanager.exceptions import TaskNotFoundError
from taskmanager.models import Task, TaskStatus
from taskmanager.repositories import TaskRepository
from taskmanager.utils.logger import get_logger

logger = get_logger(__name__)


class TaskService:
    """Service for task business logic.

    Reads run without a transaction; each mutating operation runs inside a
    single ``repository.transaction()``.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def get_all_tasks(self) -> list[Task]:
        """Return every task."""
        logger.debug("fetching all tasks")
        return self.repository.find_all()

    def get_task_by_id(self, task_id: int) -> Task:
        """Get a specific task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        logger.debug("fetching task %s", task_id)
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def find_tasks(
        self,
        *,
        status: TaskStatus | None = None,
        due_before: date | None = None,
        due_from: date | None = None,
        due_to: date | None = None,
    ) -> list[Task]:
        """List tasks through one of the derived filters.

        At most one filter applies, checked in the order: status, due_before,
        due_from/due_to range. Without any filter every task is returned.

        Raises:
            ValueError: If only one bound of the range is given
        """
        if status is not None:
            return self.repository.find_by_status(status)
        if due_before is not None:
            return self.repository.find_by_due_date_before(due_before)
        if due_from is not None or due_to is not None:
            if due_from is None or due_to is None:
                raise ValueError("due_from and due_to must be given together")
            return self.repository.find_by_due_date_between(due_from, due_to)
        return self.get_all_tasks()

    def create_task(self, task: Task) -> Task:
        """Persist a new task.

        Any id or timestamps on *task* are discarded and generated by the store.
        """
        logger.info("creating task with title: %s", task.title)
        fresh = task.model_copy(
            update={"id": None, "created_at": None, "updated_at": None}
        )
        with self.repository.transaction():
            saved = self.repository.save(fresh)
        logger.info("task created with id: %s", saved.id)
        return saved

    def update_task(self, task_id: int, task: Task) -> Task:
        """Replace the mutable fields of an existing task.

        Title, description, status and due date are all overwritten, so a
        ``None`` description or due date clears the stored value.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        logger.info("updating task %s", task_id)
        with self.repository.transaction():
            existing = self.get_task_by_id(task_id)
            changed = existing.model_copy(
                update={
                    "title": task.title,
                    "description": task.description,
                    "status": task.status,
                    "due_date": task.due_date,
                }
            )
            updated = self.repository.save(changed)
        logger.info("task updated with id: %s", updated.id)
        return updated

    def delete_task(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        logger.info("deleting task %s", task_id)
        with self.repository.transaction():
            task = self.get_task_by_id(task_id)
            self.repository.delete(task)
        logger.info("task deleted with id: %s", task_id)
