"""SQLAlchemy model for persisted push delivery attempts."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationRecordModel(Base):
    """Database representation of a notification send attempt."""

    __tablename__ = "notification_record"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(String(30), nullable=False)
    recipient_id = Column(String(128), nullable=True, index=True)
    is_broadcast = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    source_path = Column(String(255), nullable=True)
    batch_index = Column(Integer, nullable=True)
    batch_size = Column(Integer, nullable=True)
    success_count = Column(Integer, nullable=True)
    failure_count = Column(Integer, nullable=True)
    sent = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    error = Column(Text, nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    sent_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationRecordModel"]
