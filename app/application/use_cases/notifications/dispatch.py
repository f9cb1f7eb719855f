"""Delivery of notification intents through a push transport."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import anyio

from app.domain.entities import (
    IntentKind,
    NotificationErrorKind,
    NotificationIntent,
    NotificationRecord,
    PushResult,
    SendReport,
)
from app.domain.ports import (
    MAX_MULTICAST_BATCH_SIZE,
    NotificationRecordStore,
    PushTransport,
    TokenResolver,
)

logger = logging.getLogger(__name__)


def partition(items: Sequence[str], size: int = MAX_MULTICAST_BATCH_SIZE) -> list[list[str]]:
    """Split ``items`` into consecutive chunks of at most ``size`` elements."""

    if size <= 0:
        raise ValueError("Batch size must be positive")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def _describe(exc: BaseException) -> str:
    if isinstance(exc, TimeoutError):
        return "send timed out"
    return str(exc) or exc.__class__.__name__


class NotificationDispatcher:
    """Send intents to their recipients and log every attempt.

    Each recipient (or broadcast batch) is attempted independently: a missing
    token, a rejected message or a timeout is recorded and never prevents the
    remaining sends from running.
    """

    def __init__(
        self,
        *,
        transport: PushTransport,
        tokens: TokenResolver,
        records: NotificationRecordStore,
        send_timeout: float = 10.0,
        batch_size: int = MAX_MULTICAST_BATCH_SIZE,
    ) -> None:
        if not 0 < batch_size <= MAX_MULTICAST_BATCH_SIZE:
            raise ValueError(
                f"batch_size must be between 1 and {MAX_MULTICAST_BATCH_SIZE}"
            )
        self._transport = transport
        self._tokens = tokens
        self._records = records
        self._send_timeout = send_timeout
        self._batch_size = batch_size

    async def send(self, intent: NotificationIntent) -> SendReport:
        if intent.kind is IntentKind.BROADCAST:
            return await self._send_broadcast(intent)
        return await self._send_individual(intent)

    async def _send_individual(self, intent: NotificationIntent) -> SendReport:
        report = SendReport()
        if not intent.recipients:
            logger.info(
                "%s intent from %s has %s",
                intent.kind.value,
                intent.source_path,
                NotificationErrorKind.NO_RECIPIENTS.value,
            )
            return report

        async with anyio.create_task_group() as task_group:
            for user_id in sorted(intent.recipients):
                task_group.start_soon(self._send_to_recipient, intent, user_id, report)

        logger.info(
            "%s notification: %s attempted, %s sent, %s failed",
            intent.kind.value,
            report.attempted,
            report.succeeded,
            report.failed,
        )
        return report

    async def _send_to_recipient(
        self, intent: NotificationIntent, user_id: str, report: SendReport
    ) -> None:
        try:
            await self._deliver_to_recipient(intent, user_id, report)
        except Exception as exc:
            logger.exception(
                "Could not process %s notification for %s", intent.kind.value, user_id
            )
            report.record_failure(user_id, _describe(exc))

    async def _deliver_to_recipient(
        self, intent: NotificationIntent, user_id: str, report: SendReport
    ) -> None:
        # The report is only updated once the record is finalized.
        record = self._records.create(
            NotificationRecord(
                id=None,
                kind=intent.kind.value,
                title=intent.title,
                body=intent.body,
                recipient_id=user_id,
                source_path=intent.source_path,
            )
        )

        try:
            token = intent.tokens.get(user_id) or self._tokens.get_token(user_id)
        except Exception as exc:
            logger.exception("Error resolving push token for %s", user_id)
            error = _describe(exc)
            self._records.mark_failed(record.id, error)
            report.record_failure(user_id, error)
            return

        if not token:
            logger.info("User %s has no push token", user_id)
            self._records.mark_failed(record.id, NotificationErrorKind.NO_TOKEN.value)
            report.record_failure(user_id, NotificationErrorKind.NO_TOKEN.value)
            return

        try:
            with anyio.fail_after(self._send_timeout):
                result = await self._transport.send_one(
                    token, intent.title, intent.body, dict(intent.payload)
                )
        except Exception as exc:
            logger.exception("Error sending %s notification to %s", intent.kind.value, user_id)
            result = PushResult(success=False, error=_describe(exc))

        if result.success:
            self._records.mark_sent(record.id)
            report.record_success()
            return

        error = result.error or NotificationErrorKind.TRANSPORT_FAILURE.value
        self._records.mark_failed(record.id, error)
        report.record_failure(user_id, error)

    async def _send_broadcast(self, intent: NotificationIntent) -> SendReport:
        report = SendReport()
        tokens = [token for _, token in self._tokens.list_tokens() if token]
        if not tokens:
            logger.info("No users with push tokens found for broadcast")
            return report

        batches = partition(tokens, self._batch_size)
        async with anyio.create_task_group() as task_group:
            for index, batch in enumerate(batches):
                task_group.start_soon(self._send_batch, intent, index, batch, report)

        logger.info(
            "Broadcast notification sent to %s devices in %s batches (%s failed)",
            report.attempted,
            len(batches),
            report.failed,
        )
        return report

    async def _send_batch(
        self,
        intent: NotificationIntent,
        index: int,
        batch: list[str],
        report: SendReport,
    ) -> None:
        try:
            await self._deliver_batch(intent, index, batch, report)
        except Exception as exc:
            logger.exception("Could not process broadcast batch %s", index)
            report.record_failure(f"batch-{index}", _describe(exc), count=len(batch))

    async def _deliver_batch(
        self,
        intent: NotificationIntent,
        index: int,
        batch: list[str],
        report: SendReport,
    ) -> None:
        record = self._records.create(
            NotificationRecord(
                id=None,
                kind=intent.kind.value,
                title=intent.title,
                body=intent.body,
                is_broadcast=True,
                source_path=intent.source_path,
                batch_index=index,
                batch_size=len(batch),
            )
        )

        try:
            with anyio.fail_after(self._send_timeout):
                result = await self._transport.send_batch(batch, intent.title, intent.body)
        except Exception as exc:
            logger.exception("Error sending broadcast batch %s", index)
            error = _describe(exc)
            self._records.mark_failed(record.id, error, failure_count=len(batch))
            report.record_failure(f"batch-{index}", error, count=len(batch))
            return

        logger.info(
            "Batch %s sent to %s devices, %s failed",
            index,
            result.success_count,
            result.failure_count,
        )
        self._records.mark_sent(
            record.id,
            success_count=result.success_count,
            failure_count=result.failure_count,
        )
        report.record_batch(len(batch), result.success_count, result.failure_count)


__all__ = ["NotificationDispatcher", "partition"]
