"""Routing, delivery and retention of push notifications."""

from .dispatch import NotificationDispatcher, partition
from .handling import (
    build_dispatcher,
    build_router,
    handle_change_event,
    sweep_notifications,
)
from .retention import DEFAULT_RETENTION_DAYS, NotificationRetentionSweeper
from .routing import NotificationRouter
from .triggers import TriggerTable

__all__ = [
    "DEFAULT_RETENTION_DAYS",
    "NotificationDispatcher",
    "NotificationRetentionSweeper",
    "NotificationRouter",
    "TriggerTable",
    "build_dispatcher",
    "build_router",
    "handle_change_event",
    "partition",
    "sweep_notifications",
]
