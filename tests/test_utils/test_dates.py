"""Tests for timestamp helpers."""

from datetime import datetime, timedelta, timezone

from vote_notify.utils.dates import days_between, ensure_utc, utcnow


def test_utcnow_is_aware() -> None:
    assert utcnow().tzinfo == timezone.utc


def test_ensure_utc_naive() -> None:
    assert ensure_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_ensure_utc_converts_offset() -> None:
    value = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))

    result = ensure_utc(value)

    assert result.tzinfo == timezone.utc
    assert result.hour == 0


def test_days_between_rounds_down() -> None:
    start = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    assert days_between(start, start + timedelta(days=2, hours=23)) == 2


def test_days_between_never_negative() -> None:
    start = datetime(2024, 1, 2, tzinfo=timezone.utc)

    assert days_between(start, datetime(2024, 1, 1, tzinfo=timezone.utc)) == 0
