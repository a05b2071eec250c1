"""Service layer for Task Manager."""

from .task_service import TaskService

__all__ = ["TaskService"]
