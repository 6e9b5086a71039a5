"""Timestamp helpers shared by the state and voting modules."""

from datetime import datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC, treating naive values as UTC.

    GitHub timestamps arrive timezone-aware, while older state files may
    contain naive ISO strings.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days elapsed from start to end, rounded down.

    Args:
        start: Earlier timestamp
        end: Later timestamp

    Returns:
        Number of complete days, never negative
    """
    elapsed = (ensure_utc(end) - ensure_utc(start)).total_seconds()
    return max(int(elapsed // SECONDS_PER_DAY), 0)
