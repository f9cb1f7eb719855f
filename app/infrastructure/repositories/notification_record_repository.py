"""Persistence helpers for notification delivery records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import NotificationRecord
from app.infrastructure.models import NotificationRecordModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRecordRepository:
    """Provide CRUD operations for :class:`NotificationRecord` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, record_id: int) -> NotificationRecord | None:
        model = self.session.get(NotificationRecordModel, record_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_recent(
        self,
        *,
        recipient_id: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[NotificationRecord]:
        query = self.session.query(NotificationRecordModel)
        if recipient_id is not None:
            query = query.filter(NotificationRecordModel.recipient_id == recipient_id)
        query = query.order_by(
            NotificationRecordModel.created_at.desc(), NotificationRecordModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, record: NotificationRecord) -> NotificationRecord:
        model = NotificationRecordModel()
        model.kind = record.kind
        model.recipient_id = record.recipient_id
        model.is_broadcast = record.is_broadcast
        model.title = record.title
        model.body = record.body
        model.source_path = record.source_path
        model.batch_index = record.batch_index
        model.batch_size = record.batch_size
        model.success_count = record.success_count
        model.failure_count = record.failure_count
        model.sent = record.sent
        model.error = record.error
        model.created_at = ensure_app_naive_datetime(
            record.created_at or now_in_app_timezone()
        )
        model.sent_at = ensure_app_naive_datetime(record.sent_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_sent(
        self,
        record_id: int,
        *,
        success_count: int | None = None,
        failure_count: int | None = None,
    ) -> NotificationRecord:
        model = self._get_pending_model(record_id)
        model.sent = True
        model.sent_at = ensure_app_naive_datetime(now_in_app_timezone())
        if success_count is not None:
            model.success_count = success_count
        if failure_count is not None:
            model.failure_count = failure_count
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_failed(
        self,
        record_id: int,
        error: str,
        *,
        failure_count: int | None = None,
    ) -> NotificationRecord:
        model = self._get_pending_model(record_id)
        model.error = error or "unknown error"
        if failure_count is not None:
            model.failure_count = failure_count
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_created_before(self, cutoff: datetime) -> int:
        """Delete every record older than ``cutoff`` in a single statement."""

        naive_cutoff = ensure_app_naive_datetime(cutoff)
        try:
            deleted = (
                self.session.query(NotificationRecordModel)
                .filter(NotificationRecordModel.created_at < naive_cutoff)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return int(deleted or 0)

    def _get_pending_model(self, record_id: int) -> NotificationRecordModel:
        model = self.session.get(NotificationRecordModel, record_id)
        if model is None:
            msg = f"Notification record with id {record_id} not found"
            raise ValueError(msg)
        if model.sent or model.error is not None:
            msg = f"Notification record {record_id} has already been finalized"
            raise ValueError(msg)
        return model

    @staticmethod
    def _to_entity(model: NotificationRecordModel) -> NotificationRecord:
        return NotificationRecord(
            id=model.id,
            kind=model.kind,
            title=model.title,
            body=model.body,
            recipient_id=model.recipient_id,
            is_broadcast=bool(model.is_broadcast),
            source_path=model.source_path,
            batch_index=model.batch_index,
            batch_size=model.batch_size,
            success_count=model.success_count,
            failure_count=model.failure_count,
            sent=bool(model.sent),
            error=model.error,
            created_at=ensure_app_timezone(model.created_at),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["NotificationRecordRepository"]
