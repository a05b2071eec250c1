"""Migration 001: create the tasks table and its indexes."""

import sqlite3

from taskmanager.adapters.sqlite import schema
from .runner import Migration


class CreateTasksTableMigration(Migration):
    """Migration 001: Create the tasks table."""

    @property
    def version(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Create tasks table"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute(schema.CREATE_TASKS_TABLE)
        for index_sql in schema.ALL_INDEXES:
            connection.execute(index_sql)


create_tasks_table = CreateTasksTableMigration()

# Every migration, in order
ALL_MIGRATIONS = [create_tasks_table]
