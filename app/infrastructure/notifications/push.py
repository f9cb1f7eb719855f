"""Push transports used to deliver notifications to mobile devices."""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence

from anyio import to_thread
import firebase_admin
from firebase_admin import credentials, messaging
from firebase_admin.exceptions import FirebaseError

from app.config import Settings
from app.domain.entities import BatchResult, PushResult
from app.domain.ports import MAX_MULTICAST_BATCH_SIZE

logger = logging.getLogger(__name__)

_FIREBASE_APP_NAME = "smartcart-notifications"


class FirebasePushTransport:
    """Send notifications through Firebase Cloud Messaging.

    The Firebase app is created by the constructor and owned by the transport,
    so several transports (or tests) never share process-wide state.
    """

    name = "fcm"

    def __init__(
        self,
        credentials_file: str,
        *,
        project_id: str | None = None,
        app_name: str = _FIREBASE_APP_NAME,
    ) -> None:
        options = {"projectId": project_id} if project_id else None
        self._app = firebase_admin.initialize_app(
            credentials.Certificate(credentials_file), options=options, name=app_name
        )

    async def send_one(
        self, token: str, title: str, body: str, data: Mapping[str, str]
    ) -> PushResult:
        message = messaging.Message(
            notification=messaging.Notification(title=title, body=body),
            data={str(key): str(value) for key, value in data.items()},
            token=token,
        )
        try:
            message_id = await to_thread.run_sync(
                functools.partial(messaging.send, message, app=self._app),
                abandon_on_cancel=True,
            )
        except FirebaseError as exc:
            logger.warning("FCM rejected message for token %s…: %s", token[:8], exc)
            return PushResult(success=False, error=str(exc) or exc.code)
        return PushResult(success=True, message_id=message_id)

    async def send_batch(
        self, tokens: Sequence[str], title: str, body: str
    ) -> BatchResult:
        if len(tokens) > MAX_MULTICAST_BATCH_SIZE:
            msg = (
                f"Multicast batches are limited to {MAX_MULTICAST_BATCH_SIZE} tokens, "
                f"got {len(tokens)}"
            )
            raise ValueError(msg)
        message = messaging.MulticastMessage(
            notification=messaging.Notification(title=title, body=body),
            tokens=list(tokens),
        )
        response = await to_thread.run_sync(
            functools.partial(messaging.send_each_for_multicast, message, app=self._app),
            abandon_on_cancel=True,
        )
        return BatchResult(
            success_count=response.success_count,
            failure_count=response.failure_count,
        )

    def close(self) -> None:
        firebase_admin.delete_app(self._app)


class LoggingPushTransport:
    """No-op transport used when Firebase credentials are not configured."""

    name = "logging"

    async def send_one(
        self, token: str, title: str, body: str, data: Mapping[str, str]
    ) -> PushResult:
        logger.info(
            "Push delivery disabled; dropping message %r for token %s…", title, token[:8]
        )
        return PushResult(success=True)

    async def send_batch(
        self, tokens: Sequence[str], title: str, body: str
    ) -> BatchResult:
        logger.info(
            "Push delivery disabled; dropping broadcast %r for %s devices", title, len(tokens)
        )
        return BatchResult(success_count=len(tokens), failure_count=0)

    def close(self) -> None:
        return None


def build_push_transport(settings: Settings) -> FirebasePushTransport | LoggingPushTransport:
    """Return the transport matching ``settings``."""

    if not settings.firebase_credentials_file:
        logger.info("Firebase credentials not configured; push delivery is disabled")
        return LoggingPushTransport()
    return FirebasePushTransport(
        settings.firebase_credentials_file, project_id=settings.firebase_project_id
    )


__all__ = [
    "FirebasePushTransport",
    "LoggingPushTransport",
    "MAX_MULTICAST_BATCH_SIZE",
    "build_push_transport",
]
