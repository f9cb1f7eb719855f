"""In-memory collaborators used to exercise the notification core."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import anyio

from app.domain.entities import BatchResult, NotificationRecord, Product, PushResult


class RecordingTransport:
    """Push transport that records every call instead of contacting FCM."""

    name = "recording"

    def __init__(
        self,
        *,
        rejected_tokens: Sequence[str] = (),
        raising_tokens: Sequence[str] = (),
        raising_batch_markers: Sequence[str] = (),
        batch_failures: int = 0,
        delay: float = 0.0,
    ) -> None:
        self.rejected_tokens = set(rejected_tokens)
        self.raising_tokens = set(raising_tokens)
        self.raising_batch_markers = set(raising_batch_markers)
        self.batch_failures = batch_failures
        self.delay = delay
        self.sent: list[tuple[str, str, str, dict[str, str]]] = []
        self.batches: list[list[str]] = []

    async def send_one(
        self, token: str, title: str, body: str, data: Mapping[str, str]
    ) -> PushResult:
        if self.delay:
            await anyio.sleep(self.delay)
        self.sent.append((token, title, body, dict(data)))
        if token in self.raising_tokens:
            raise ConnectionError("connection reset by peer")
        if token in self.rejected_tokens:
            return PushResult(success=False, error="registration-token-not-registered")
        return PushResult(success=True, message_id=f"msg-{len(self.sent)}")

    async def send_batch(
        self, tokens: Sequence[str], title: str, body: str
    ) -> BatchResult:
        if self.delay:
            await anyio.sleep(self.delay)
        self.batches.append(list(tokens))
        if self.raising_batch_markers.intersection(tokens):
            raise ConnectionError("multicast quota exceeded")
        failures = min(self.batch_failures, len(tokens))
        return BatchResult(success_count=len(tokens) - failures, failure_count=failures)

    @property
    def sent_tokens(self) -> list[str]:
        return [token for token, *_ in self.sent]


class FakeCatalog:
    def __init__(self, *products: Product) -> None:
        self.products = {product.id: product for product in products}
        self.lookups: list[str] = []

    def get_product(self, product_id: str) -> Product | None:
        self.lookups.append(product_id)
        return self.products.get(product_id)


class FakeShoppingLists:
    """Reverse index returning one entry per list item, repeats included."""

    def __init__(self, index: dict[str, list[str]] | None = None) -> None:
        self.index = index or {}

    def users_referencing_product(self, product_id: str) -> list[str]:
        return list(self.index.get(product_id, []))


class FailingTokenResolver:
    """Token resolver that raises for the given users and delegates otherwise."""

    def __init__(self, inner, *failing_users: str) -> None:
        self.inner = inner
        self.failing_users = set(failing_users)

    def get_token(self, user_id: str) -> str | None:
        if user_id in self.failing_users:
            raise LookupError(f"token lookup failed for {user_id}")
        return self.inner.get_token(user_id)

    def list_tokens(self) -> Sequence[tuple[str, str]]:
        return self.inner.list_tokens()


class FailingRecordStore:
    """Record store whose ``create`` raises for matching records."""

    def __init__(
        self, inner, *, recipients: Sequence[str] = (), batch_indexes: Sequence[int] = ()
    ) -> None:
        self.inner = inner
        self.recipients = set(recipients)
        self.batch_indexes = set(batch_indexes)

    def create(self, record: NotificationRecord) -> NotificationRecord:
        if record.recipient_id in self.recipients or record.batch_index in self.batch_indexes:
            raise RuntimeError("database is locked")
        return self.inner.create(record)

    def mark_sent(self, record_id: int, **counts) -> NotificationRecord:
        return self.inner.mark_sent(record_id, **counts)

    def mark_failed(self, record_id: int, error: str, **counts) -> NotificationRecord:
        return self.inner.mark_failed(record_id, error, **counts)

    def delete_created_before(self, cutoff):
        return self.inner.delete_created_before(cutoff)
