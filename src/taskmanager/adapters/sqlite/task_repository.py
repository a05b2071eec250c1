"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any

from taskmanager.adapters.sqlite.connection import get_connection
from taskmanager.adapters.sqlite.utils import (
    now_utc,
    parse_date,
    parse_datetime,
    row_to_dict,
    to_db_date,
    to_db_datetime,
)
from taskmanager.exceptions import StorageError
from taskmanager.models import Task, TaskStatus
from taskmanager.repositories import TaskRepository

_COLUMNS = "id, title, description, status, due_date, created_at, updated_at"


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of the task repository.

    Statements run on one connection and are not committed individually;
    callers group writes with :meth:`transaction`.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        """Initialize SQLite task repository.

        Args:
            db_path: Database file path, used when no connection is given.
            connection: An already-open connection to use.
        """
        if db_path is None and connection is None:
            raise ValueError("Either db_path or connection is required")
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[None]:
        try:
            yield
        except BaseException:
            self.connection.rollback()
            raise
        self.connection.commit()

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self.connection.execute(sql, params)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e

    def _query(self, where: str = "", params: tuple[Any, ...] = ()) -> list[Task]:
        sql = f"SELECT {_COLUMNS} FROM tasks {where} ORDER BY id"
        return [self._row_to_task(row) for row in self._execute(sql, params)]

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        data = row_to_dict(row)
        data["due_date"] = parse_date(data["due_date"])
        data["created_at"] = parse_datetime(data["created_at"])
        data["updated_at"] = parse_datetime(data["updated_at"])
        return Task(**data)

    def save(self, task: Task) -> Task:
        if task.id is None:
            return self._insert(task)
        return self._update(task)

    def _insert(self, task: Task) -> Task:
        now = now_utc()
        cursor = self._execute(
            """
            INSERT INTO tasks (title, description, status, due_date, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                task.title,
                task.description,
                task.status.value,
                to_db_date(task.due_date),
                to_db_datetime(now),
                to_db_datetime(now),
            ),
        )
        return task.model_copy(
            update={"id": cursor.lastrowid, "created_at": now, "updated_at": now}
        )

    def _update(self, task: Task) -> Task:
        now = now_utc()
        # Clock steps backwards must not move updated_at backwards
        if task.updated_at is not None and task.updated_at > now:
            now = task.updated_at
        cursor = self._execute(
            """
            UPDATE tasks
            SET title = ?, description = ?, status = ?, due_date = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                task.title,
                task.description,
                task.status.value,
                to_db_date(task.due_date),
                to_db_datetime(now),
                task.id,
            ),
        )
        if cursor.rowcount == 0:
            raise StorageError(f"Cannot update task {task.id}: row does not exist")
        return task.model_copy(update={"updated_at": now})

    def find_by_id(self, task_id: int) -> Task | None:
        row = self._execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,)
        ).fetchone()
        return self._row_to_task(row) if row is not None else None

    def find_all(self) -> list[Task]:
        return self._query()

    def delete(self, task: Task) -> None:
        self._execute("DELETE FROM tasks WHERE id = ?", (task.id,))

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._query("WHERE status = ?", (TaskStatus(status).value,))

    def find_by_due_date_before(self, before: date) -> list[Task]:
        return self._query(
            "WHERE due_date IS NOT NULL AND due_date < ?", (to_db_date(before),)
        )

    def find_by_due_date_between(self, start: date, end: date) -> list[Task]:
        return self._query(
            "WHERE due_date BETWEEN ? AND ?", (to_db_date(start), to_db_date(end))
        )
