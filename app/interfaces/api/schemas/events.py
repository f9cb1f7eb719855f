"""Pydantic models describing document change events."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ChangeEvent, EventKind, IntentKind, SendReport


class ChangeEventRequest(BaseModel):
    """Change event delivered by the document store's change feed."""

    model_config = ConfigDict(populate_by_name=True)

    document_path: str = Field(
        ..., alias="documentPath", min_length=1, description="Path of the changed document"
    )
    event_kind: EventKind = Field(..., alias="eventKind")
    before_state: dict[str, Any] | None = Field(default=None, alias="beforeState")
    after_state: dict[str, Any] = Field(..., alias="afterState")

    def to_event(self) -> ChangeEvent:
        return ChangeEvent(
            document_path=self.document_path,
            after_state=self.after_state,
            before_state=self.before_state,
            event_kind=self.event_kind,
        )


class SendReportRead(BaseModel):
    """Counters describing a completed dispatch."""

    attempted: int
    succeeded: int
    failed: int
    per_recipient_errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_report(cls, report: SendReport) -> "SendReportRead":
        return cls(
            attempted=report.attempted,
            succeeded=report.succeeded,
            failed=report.failed,
            per_recipient_errors=dict(report.per_recipient_errors),
        )


class ChangeEventResponse(BaseModel):
    handled: bool
    kind: IntentKind | None = None
    title: str | None = None
    body: str | None = None
    report: SendReportRead | None = None


__all__ = ["ChangeEventRequest", "ChangeEventResponse", "SendReportRead"]
