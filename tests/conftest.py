"""Shared fixtures for the notification service tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``app`` package) is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "Asia/Kolkata")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import initialize_database
from app.infrastructure.repositories import (
    NotificationRecordRepository,
    UserTokenRepository,
)

from tests.fakes import RecordingTransport


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def engine():
    """Return an isolated in-memory database with every table created."""

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def records(session) -> NotificationRecordRepository:
    return NotificationRecordRepository(session)


@pytest.fixture()
def tokens(session) -> UserTokenRepository:
    return UserTokenRepository(session)


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()
