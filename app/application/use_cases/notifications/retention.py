"""Purging of notification records older than the retention window."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from app.domain.ports import NotificationRecordStore
from app.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS = 30


class NotificationRetentionSweeper:
    """Delete stale notification records in one atomic batch."""

    def __init__(self, records: NotificationRecordStore) -> None:
        self._records = records

    def sweep(
        self,
        now: datetime | None = None,
        retention_days: int = DEFAULT_RETENTION_DAYS,
    ) -> int:
        """Delete records created before ``now - retention_days`` and return how many."""

        if retention_days < 0:
            raise ValueError("retention_days must not be negative")

        reference = ensure_app_timezone(now) or now_in_app_timezone()
        cutoff = reference - timedelta(days=retention_days)
        deleted = self._records.delete_created_before(cutoff)
        logger.info("Deleted %s old notifications (cutoff %s)", deleted, cutoff.isoformat())
        return deleted


__all__ = ["DEFAULT_RETENTION_DAYS", "NotificationRetentionSweeper"]
