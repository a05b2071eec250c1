"""Per-request database access for the Flask app."""

from __future__ import annotations

import sqlite3

from flask import current_app, g

from taskmanager.adapters.sqlite import SqliteTaskRepository, get_connection
from taskmanager.services import TaskService


def get_db() -> sqlite3.Connection:
    """Connection of the current app context, opened on first use."""
    if "db" not in g:
        g.db = get_connection(current_app.config["DATABASE_PATH"])
    return g.db


def close_db(exc: BaseException | None = None) -> None:
    db = g.pop("db", None)
    if db is not None:
        db.close()


def get_task_service() -> TaskService:
    return TaskService(SqliteTaskRepository(connection=get_db()))
