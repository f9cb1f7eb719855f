"""Endpoints for inspecting and purging the notification log."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import sweep_notifications
from app.config import Settings, get_settings
from app.infrastructure.database import get_db
from app.infrastructure.repositories import NotificationRecordRepository
from app.interfaces.api.schemas import (
    NotificationRecordRead,
    SweepRequest,
    SweepResponse,
)

router = APIRouter(tags=["notifications"])


@router.get("/notifications/", response_model=list[NotificationRecordRead])
def list_notifications(
    recipient_id: str | None = None,
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[NotificationRecordRead]:
    """Return the most recent send attempts, newest first."""

    records = NotificationRecordRepository(db).list_recent(
        recipient_id=recipient_id, limit=limit
    )
    return [NotificationRecordRead.model_validate(record) for record in records]


@router.get("/notifications/{record_id}", response_model=NotificationRecordRead)
def read_notification(record_id: int, db: Session = Depends(get_db)) -> NotificationRecordRead:
    record = NotificationRecordRepository(db).get(record_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification record not found"
        )
    return NotificationRecordRead.model_validate(record)


@router.post("/maintenance/sweep", response_model=SweepResponse)
def sweep_old_notifications(
    payload: SweepRequest | None = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SweepResponse:
    """Delete notification records older than the retention window."""

    request = payload or SweepRequest()
    retention_days = (
        request.retention_days
        if request.retention_days is not None
        else settings.notification_retention_days
    )
    try:
        deleted = sweep_notifications(
            db, settings, now=request.now, retention_days=retention_days
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SweepResponse(deleted=deleted, retention_days=retention_days)


__all__ = ["router"]
