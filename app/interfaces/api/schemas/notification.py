"""Pydantic models describing notification records."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRecordRead(BaseModel):
    """Representation of a send attempt returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
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
    sent: bool
    error: str | None = None
    created_at: datetime | None = None
    sent_at: datetime | None = None


class SweepRequest(BaseModel):
    """Optional overrides for a retention sweep."""

    retention_days: int | None = Field(
        default=None, ge=0, description="Age in days beyond which records are deleted"
    )
    now: datetime | None = Field(
        default=None, description="Reference time; defaults to the current time"
    )


class SweepResponse(BaseModel):
    deleted: int
    retention_days: int


__all__ = ["NotificationRecordRead", "SweepRequest", "SweepResponse"]
