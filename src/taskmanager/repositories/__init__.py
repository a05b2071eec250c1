"""Repository interfaces for Task Manager.

Implementations (Adapters) are in:
- taskmanager.adapters.sqlite (SQLite storage)
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
