"""Forward-only, version-numbered schema migrations for the task store.

Applied versions are recorded in ``schema_version``; each migration runs in
its own transaction together with its bookkeeping row.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from taskmanager.utils.logger import get_logger

logger = get_logger(__name__)


class Migration(ABC):
    """Base class for database migrations."""

    @property
    @abstractmethod
    def version(self) -> int:
        """Migration version number (sequential)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the migration."""

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the migration on *connection* without committing."""


class MigrationRunner:
    """Applies pending migrations and reports the schema history."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        self.connection.execute("""
            CREATE TABLE IF NOT EXISTS schema_version (
                version INTEGER PRIMARY KEY,
                description TEXT NOT NULL,
                applied_at TEXT NOT NULL
            )
        """)
        self.connection.commit()

    def get_current_version(self) -> int:
        """Highest applied version, 0 for an empty database."""
        row = self.connection.execute(
            "SELECT MAX(version) FROM schema_version"
        ).fetchone()
        return row[0] if row[0] is not None else 0

    def pending(self, migrations: list[Migration]) -> list[Migration]:
        """Migrations newer than the current version, in version order."""
        current = self.get_current_version()
        return sorted(
            (m for m in migrations if m.version > current), key=lambda m: m.version
        )

    def run_migration(self, migration: Migration) -> None:
        """Apply a single migration.

        Raises:
            ValueError: If the version is not newer than the current one
            RuntimeError: If the migration fails; the transaction is rolled back
        """
        current = self.get_current_version()
        if migration.version <= current:
            raise ValueError(
                f"Migration version {migration.version} is not greater than "
                f"current version {current}"
            )

        try:
            migration.up(self.connection)
            self.connection.execute(
                "INSERT INTO schema_version (version, description, applied_at) "
                "VALUES (?, ?, ?)",
                (
                    migration.version,
                    migration.description,
                    datetime.now(UTC).isoformat(),
                ),
            )
            self.connection.commit()
        except Exception as e:
            self.connection.rollback()
            logger.error("migration %s failed: %s", migration.version, e)
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        logger.info(
            "applied migration %s: %s", migration.version, migration.description
        )

    def run_migrations(self, migrations: list[Migration]) -> int:
        """Apply every pending migration.

        Returns:
            Number of migrations applied
        """
        pending = self.pending(migrations)
        for migration in pending:
            self.run_migration(migration)
        return len(pending)

    def get_migration_history(self) -> list[dict]:
        """Applied migrations as dicts with version, description, applied_at."""
        cursor = self.connection.execute(
            "SELECT version, description, applied_at FROM schema_version "
            "ORDER BY version"
        )
        return [
            {"version": row[0], "description": row[1], "applied_at": row[2]}
            for row in cursor.fetchall()
        ]


def get_current_version(connection: sqlite3.Connection) -> int:
    """Current schema version of *connection*."""
    return MigrationRunner(connection).get_current_version()


def run_migrations(connection: sqlite3.Connection, migrations: list[Migration]) -> int:
    """Apply pending *migrations* on *connection*; returns how many ran."""
    return MigrationRunner(connection).run_migrations(migrations)
