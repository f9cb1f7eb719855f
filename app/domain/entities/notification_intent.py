"""Domain entity describing a notification that should be delivered."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class IntentKind(str, Enum):
    """Classification produced by the notification router."""

    DIRECT = "direct"
    BROADCAST = "broadcast"
    STATUS_CHANGE = "status_change"
    PRICE_DROP = "price_drop"


@dataclass(frozen=True)
class NotificationIntent:
    """Message plus recipient set resolved from a change event.

    Broadcast intents leave ``recipients`` empty; the dispatcher resolves every
    registered device when sending. ``tokens`` holds delivery tokens carried by
    the event itself and takes precedence over the token resolver.
    """

    kind: IntentKind
    title: str
    body: str
    recipients: frozenset[str] = frozenset()
    payload: Mapping[str, str] = field(default_factory=dict)
    tokens: Mapping[str, str] = field(default_factory=dict)
    source_path: str | None = None

    @property
    def is_broadcast(self) -> bool:
        return self.kind is IntentKind.BROADCAST


__all__ = ["IntentKind", "NotificationIntent"]
