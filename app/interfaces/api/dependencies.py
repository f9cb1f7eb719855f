"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationDispatcher,
    NotificationRouter,
    build_dispatcher,
    build_router,
)
from app.config import Settings, get_settings
from app.domain.ports import PushTransport
from app.infrastructure.database import get_db


def get_push_transport(request: Request) -> PushTransport:
    """Return the push transport created when the application started."""

    transport = getattr(request.app.state, "push_transport", None)
    if transport is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Push transport is not initialized",
        )
    return transport


def get_notification_router(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> NotificationRouter:
    return build_router(db, settings)


def get_notification_dispatcher(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    transport: PushTransport = Depends(get_push_transport),
) -> NotificationDispatcher:
    return build_dispatcher(db, settings, transport)
