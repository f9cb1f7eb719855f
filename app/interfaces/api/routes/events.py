"""Ingestion endpoint for document change events."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.application.use_cases.notifications import (
    NotificationDispatcher,
    NotificationRouter,
    handle_change_event,
)
from app.interfaces.api.dependencies import (
    get_notification_dispatcher,
    get_notification_router,
)
from app.interfaces.api.schemas import (
    ChangeEventRequest,
    ChangeEventResponse,
    SendReportRead,
)

router = APIRouter(prefix="/events", tags=["events"])

logger = logging.getLogger(__name__)


@router.post("/documents", response_model=ChangeEventResponse)
async def receive_document_event(
    payload: ChangeEventRequest,
    notification_router: NotificationRouter = Depends(get_notification_router),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> ChangeEventResponse:
    """Route a document change and push the resulting notification, if any."""

    event = payload.to_event()
    intent, report = await handle_change_event(
        event, router=notification_router, dispatcher=dispatcher
    )
    if intent is None or report is None:
        return ChangeEventResponse(handled=False)

    logger.info(
        "Handled %s event on %s as %s",
        event.event_kind.value,
        event.document_path,
        intent.kind.value,
    )
    return ChangeEventResponse(
        handled=True,
        kind=intent.kind,
        title=intent.title,
        body=intent.body,
        report=SendReportRead.from_report(report),
    )


__all__ = ["router"]
