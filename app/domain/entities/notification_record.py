"""Domain entity representing a persisted push delivery attempt."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationRecord:
    """Log entry written by the dispatcher for each send attempt.

    A record starts pending and is finalized exactly once, either ``sent`` or
    with an ``error``. Broadcast batches are stored as a single record carrying
    the batch counters.
    """

    id: int | None
    kind: str
    title: str
    body: str
    recipient_id: str | None = None
    is_broadcast: bool = False
    source_path: str | None = None
    batch_index: int | None = None
    batch_size: int | None = None
    success_count: int | None = None
    failure_count: int | None = None
    sent: bool = False
    error: str | None = None
    created_at: datetime | None = None
    sent_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return not self.sent and self.error is None


__all__ = ["NotificationRecord"]
