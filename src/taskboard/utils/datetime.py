"""Utilities for datetime handling."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def epoch_millis(dt: datetime | None = None) -> int:
    """Milliseconds since the Unix epoch (defaults to now)."""
    if dt is None:
        dt = now_utc()
    return int(dt.timestamp() * 1000)
