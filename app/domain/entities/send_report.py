"""Outcome of dispatching a notification intent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NotificationErrorKind(str, Enum):
    """Recoverable failures captured while routing or dispatching."""

    NO_TOKEN = "no token"
    TRANSPORT_FAILURE = "transport failure"
    MISSING_REFERENCED_DOCUMENT = "missing referenced document"
    NO_RECIPIENTS = "no recipients"


@dataclass
class SendReport:
    """Aggregated counters for one dispatch.

    ``per_recipient_errors`` is keyed by user id for individual sends and by
    ``batch-<index>`` for broadcast batches that failed as a whole.
    """

    attempted: int = 0
    succeeded: int = 0
    failed: int = 0
    per_recipient_errors: dict[str, str] = field(default_factory=dict)

    def record_success(self, count: int = 1) -> None:
        self.attempted += count
        self.succeeded += count

    def record_failure(self, key: str, error: str, count: int = 1) -> None:
        self.attempted += count
        self.failed += count
        self.per_recipient_errors[key] = error

    def record_batch(self, size: int, success_count: int, failure_count: int) -> None:
        self.attempted += size
        self.succeeded += success_count
        self.failed += failure_count


__all__ = ["NotificationErrorKind", "SendReport"]
