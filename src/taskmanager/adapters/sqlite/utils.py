"""Row conversion helpers for the SQLite adapter."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any


def now_utc() -> datetime:
    """Current instant, timezone-aware in UTC."""
    return datetime.now(UTC)


def to_db_datetime(value: datetime) -> str:
    """Serialize an instant for storage (ISO 8601, UTC offset)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def parse_datetime(value: str | datetime | None) -> datetime | None:
    """Parse a stored instant; naive values are taken as UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def to_db_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def parse_date(value: str | date | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value)


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary."""
    if row is None:
        return {}
    return dict(row)
