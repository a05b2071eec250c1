"""Database connection management for the SQLite task store.

Connections are cheap to open, so every request gets its own. Schema
migrations are applied once, when the application starts.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from taskmanager.adapters.sqlite.migrations import ALL_MIGRATIONS, MigrationRunner
from taskmanager.utils.logger import get_logger

logger = get_logger(__name__)

MEMORY = ":memory:"


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Open a connection configured for Task Manager usage.

    - Rows support access by column name
    - Foreign keys enforced
    - WAL journal for concurrent readers (file databases only)
    - Parent directory created on demand

    Args:
        db_path: Path to the database file, or ``":memory:"``

    Returns:
        sqlite3.Connection
    """
    if str(db_path) != MEMORY:
        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

    connection = sqlite3.connect(
        str(db_path),
        check_same_thread=False,
        timeout=30.0,  # Wait up to 30s for locks
    )
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA foreign_keys = ON")
    if str(db_path) != MEMORY:
        connection.execute("PRAGMA journal_mode = WAL")
    return connection


def migrate(connection: sqlite3.Connection) -> int:
    """Apply every pending migration; returns how many ran."""
    applied = MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)
    if applied:
        logger.info("database schema migrated (%d migration(s))", applied)
    return applied


def init_database(db_path: str | Path) -> int:
    """Create the database if needed and bring its schema up to date."""
    connection = get_connection(db_path)
    try:
        return migrate(connection)
    finally:
        connection.close()
