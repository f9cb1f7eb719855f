"""Tests for the notification retention sweeper."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.notifications import NotificationRetentionSweeper
from app.domain.entities import NotificationRecord

NOW = datetime(2026, 3, 31, 12, 0, tzinfo=timezone.utc)


def _record(created_at: datetime, **overrides) -> NotificationRecord:
    values = {
        "id": None,
        "kind": "direct",
        "title": "Hello",
        "body": "World",
        "recipient_id": "user-1",
        "created_at": created_at,
    }
    values.update(overrides)
    return NotificationRecord(**values)


def test_sweep_deletes_only_records_past_the_window(records) -> None:
    records.create(_record(NOW - timedelta(days=45)))
    records.create(_record(NOW - timedelta(days=30, minutes=1)))
    kept_recent = records.create(_record(NOW - timedelta(days=29)))
    kept_today = records.create(_record(NOW - timedelta(hours=2), is_broadcast=True))

    deleted = NotificationRetentionSweeper(records).sweep(now=NOW)

    assert deleted == 2
    remaining = {record.id for record in records.list_recent()}
    assert remaining == {kept_recent.id, kept_today.id}


def test_sweep_is_idempotent(records) -> None:
    records.create(_record(NOW - timedelta(days=60)))
    sweeper = NotificationRetentionSweeper(records)

    assert sweeper.sweep(now=NOW) == 1
    assert sweeper.sweep(now=NOW) == 0


def test_sweep_honours_custom_retention(records) -> None:
    records.create(_record(NOW - timedelta(days=8)))
    records.create(_record(NOW - timedelta(days=6)))

    assert NotificationRetentionSweeper(records).sweep(now=NOW, retention_days=7) == 1


def test_sweep_on_empty_log_returns_zero(records) -> None:
    assert NotificationRetentionSweeper(records).sweep(now=NOW) == 0


def test_naive_reference_time_is_read_in_app_timezone(records) -> None:
    # The cutoff is 2026-01-30 00:00 in Asia/Kolkata, i.e. 2026-01-29 18:30 UTC.
    records.create(_record(datetime(2026, 1, 29, 18, 0, tzinfo=timezone.utc)))
    records.create(_record(datetime(2026, 1, 29, 19, 0, tzinfo=timezone.utc)))

    deleted = NotificationRetentionSweeper(records).sweep(now=datetime(2026, 3, 1))

    assert deleted == 1


def test_negative_retention_is_rejected(records) -> None:
    with pytest.raises(ValueError):
        NotificationRetentionSweeper(records).sweep(now=NOW, retention_days=-1)
