"""SQLite storage adapter for Task Manager."""

from .connection import get_connection, init_database, migrate
from .task_repository import SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "get_connection",
    "init_database",
    "migrate",
]
