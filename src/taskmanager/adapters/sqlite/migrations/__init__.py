"""Database migration system for the SQLite task store."""

from .m001_create_tasks_table import ALL_MIGRATIONS
from .runner import (
    Migration,
    MigrationRunner,
    get_current_version,
    run_migrations,
)

__all__ = [
    "ALL_MIGRATIONS",
    "Migration",
    "MigrationRunner",
    "get_current_version",
    "run_migrations",
]
