"""Collaborator interfaces the notification core depends on."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from datetime import datetime
from typing import Final, Protocol

from app.domain.entities import BatchResult, NotificationRecord, Product, PushResult

MAX_MULTICAST_BATCH_SIZE: Final[int] = 500


class TokenResolver(Protocol):
    """Map user identifiers to their current push delivery token."""

    def get_token(self, user_id: str) -> str | None: ...

    def list_tokens(self) -> Sequence[tuple[str, str]]: ...


class ProductCatalog(Protocol):
    def get_product(self, product_id: str) -> Product | None: ...


class ShoppingListIndex(Protocol):
    """Reverse index from a product to the users listing it.

    A user listing the product on several lists may appear more than once.
    """

    def users_referencing_product(self, product_id: str) -> Collection[str]: ...


class PushTransport(Protocol):
    """Deliver messages to device tokens.

    ``send_batch`` accepts at most ``MAX_MULTICAST_BATCH_SIZE`` tokens per call.
    """

    name: str

    async def send_one(
        self, token: str, title: str, body: str, data: Mapping[str, str]
    ) -> PushResult: ...

    async def send_batch(
        self, tokens: Sequence[str], title: str, body: str
    ) -> BatchResult: ...


class NotificationRecordStore(Protocol):
    def create(self, record: NotificationRecord) -> NotificationRecord: ...

    def mark_sent(
        self,
        record_id: int,
        *,
        success_count: int | None = None,
        failure_count: int | None = None,
    ) -> NotificationRecord: ...

    def mark_failed(
        self,
        record_id: int,
        error: str,
        *,
        failure_count: int | None = None,
    ) -> NotificationRecord: ...

    def delete_created_before(self, cutoff: datetime) -> int: ...


__all__ = [
    "MAX_MULTICAST_BATCH_SIZE",
    "NotificationRecordStore",
    "ProductCatalog",
    "PushTransport",
    "ShoppingListIndex",
    "TokenResolver",
]
