"""Unit tests for the MigrationRunner and helper functions in migrations/runner.py."""

from __future__ import annotations

import sqlite3

import pytest

from taskmanager.adapters.sqlite.migrations import ALL_MIGRATIONS
from taskmanager.adapters.sqlite.migrations.runner import (
    Migration,
    MigrationRunner,
    get_current_version,
    run_migrations,
)


# ---------------------------------------------------------------------------
# Concrete test migrations
# ---------------------------------------------------------------------------


class _Migration1(Migration):
    @property
    def version(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Create test_table_one"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute("CREATE TABLE test_table_one (id INTEGER PRIMARY KEY)")


class _Migration2(Migration):
    @property
    def version(self) -> int:
        return 2

    @property
    def description(self) -> str:
        return "Create test_table_two"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute("CREATE TABLE test_table_two (id INTEGER PRIMARY KEY)")


class _FailingMigration(Migration):
    @property
    def version(self) -> int:
        return 3

    @property
    def description(self) -> str:
        return "Intentionally fails"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute("CREATE TABLE half_done (id INTEGER)")
        raise sqlite3.OperationalError("boom")


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


def _tables(connection: sqlite3.Connection) -> set[str]:
    rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {row[0] for row in rows}


def test_fresh_database_is_version_zero(conn):
    assert get_current_version(conn) == 0


def test_runs_pending_in_version_order(conn):
    applied = run_migrations(conn, [_Migration2(), _Migration1()])

    assert applied == 2
    assert get_current_version(conn) == 2
    assert {"test_table_one", "test_table_two"} <= _tables(conn)


def test_second_run_is_noop(conn):
    run_migrations(conn, [_Migration1()])
    assert run_migrations(conn, [_Migration1()]) == 0


def test_rejects_old_version(conn):
    runner = MigrationRunner(conn)
    runner.run_migration(_Migration1())

    with pytest.raises(ValueError):
        runner.run_migration(_Migration1())


def test_failure_rolls_back_and_wraps(conn):
    runner = MigrationRunner(conn)

    with pytest.raises(RuntimeError, match="Migration 3 failed"):
        runner.run_migration(_FailingMigration())

    assert runner.get_current_version() == 0


def test_history_records_each_migration(conn):
    runner = MigrationRunner(conn)
    runner.run_migrations([_Migration1(), _Migration2()])

    history = runner.get_migration_history()

    assert [h["version"] for h in history] == [1, 2]
    assert history[0]["description"] == "Create test_table_one"
    assert history[0]["applied_at"]


def test_pending_lists_only_newer(conn):
    runner = MigrationRunner(conn)
    runner.run_migration(_Migration1())

    assert [m.version for m in runner.pending([_Migration1(), _Migration2()])] == [2]


# ---------------------------------------------------------------------------
# Task schema
# ---------------------------------------------------------------------------


class TestTasksSchema:
    @pytest.fixture
    def migrated(self, conn):
        run_migrations(conn, ALL_MIGRATIONS)
        return conn

    def test_creates_tasks_table(self, migrated):
        assert "tasks" in _tables(migrated)

    def test_creates_indexes(self, migrated):
        rows = migrated.execute(
            "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = 'tasks'"
        )
        names = {row[0] for row in rows}
        assert {
            "idx_tasks_status",
            "idx_tasks_due_date",
            "idx_tasks_status_due_date",
        } <= names

    def test_status_check_constraint(self, migrated):
        with pytest.raises(sqlite3.IntegrityError):
            migrated.execute(
                "INSERT INTO tasks (title, status, created_at, updated_at) "
                "VALUES ('t', 'BLOCKED', 'x', 'x')"
            )

    def test_title_required(self, migrated):
        with pytest.raises(sqlite3.IntegrityError):
            migrated.execute(
                "INSERT INTO tasks (title, status, created_at, updated_at) "
                "VALUES (NULL, 'TODO', 'x', 'x')"
            )
