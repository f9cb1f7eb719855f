"""SQLAlchemy model for the shopper table."""

from sqlalchemy import Column, DateTime, String, func

from app.infrastructure.database import Base


class UserModel(Base):
    """Shopper account holding the current device token."""

    __tablename__ = "users"

    id = Column(String(128), primary_key=True)
    name = Column(String(120), nullable=True)
    fcm_token = Column(String(512), nullable=True)
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["UserModel"]
