"""Value objects returned by push transports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PushResult:
    """Result of delivering a message to a single device token."""

    success: bool
    message_id: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class BatchResult:
    """Aggregate counts reported by a multicast call."""

    success_count: int
    failure_count: int


__all__ = ["BatchResult", "PushResult"]
