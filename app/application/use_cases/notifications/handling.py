"""Orchestration of a change event from routing to delivery."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.config import Settings
from app.domain.entities import ChangeEvent, NotificationIntent, SendReport
from app.domain.ports import PushTransport
from app.infrastructure.repositories import (
    NotificationRecordRepository,
    ProductRepository,
    ShoppingListRepository,
    UserTokenRepository,
)

from .dispatch import NotificationDispatcher
from .retention import NotificationRetentionSweeper
from .routing import NotificationRouter

logger = logging.getLogger(__name__)


def build_router(session: Session, settings: Settings) -> NotificationRouter:
    return NotificationRouter(
        catalog=ProductRepository(session),
        shopping_lists=ShoppingListRepository(session),
        broadcast_title=settings.broadcast_title,
        currency_symbol=settings.currency_symbol,
    )


def build_dispatcher(
    session: Session, settings: Settings, transport: PushTransport
) -> NotificationDispatcher:
    return NotificationDispatcher(
        transport=transport,
        tokens=UserTokenRepository(session),
        records=NotificationRecordRepository(session),
        send_timeout=settings.push_send_timeout_seconds,
    )


async def handle_change_event(
    event: ChangeEvent,
    *,
    router: NotificationRouter,
    dispatcher: NotificationDispatcher,
) -> tuple[NotificationIntent | None, SendReport | None]:
    """Route ``event`` and deliver the resulting intent, if any."""

    intent = router.route(event)
    if intent is None:
        logger.debug(
            "No notification for %s event on %s",
            event.event_kind.value,
            event.document_path,
        )
        return None, None

    report = await dispatcher.send(intent)
    if report.attempted == 0:
        logger.info("No notifications sent for %s", event.document_path)
    return intent, report


def sweep_notifications(
    session: Session,
    settings: Settings,
    *,
    now: datetime | None = None,
    retention_days: int | None = None,
) -> int:
    """Apply the retention window (the configured one by default) to the notification log."""

    if retention_days is None:
        retention_days = settings.notification_retention_days
    sweeper = NotificationRetentionSweeper(NotificationRecordRepository(session))
    return sweeper.sweep(now=now, retention_days=retention_days)


__all__ = [
    "build_dispatcher",
    "build_router",
    "handle_change_event",
    "sweep_notifications",
]
