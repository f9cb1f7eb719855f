"""Tests for the SQLAlchemy backed collaborators."""

from __future__ import annotations

import pytest

from app.domain.entities import NotificationRecord, Product
from app.infrastructure.repositories import ProductRepository, ShoppingListRepository


def _pending(**overrides) -> NotificationRecord:
    values = {"id": None, "kind": "direct", "title": "t", "body": "b", "recipient_id": "u1"}
    values.update(overrides)
    return NotificationRecord(**values)


def test_created_record_is_pending_with_timestamp(records) -> None:
    record = records.create(_pending())

    assert record.id is not None
    assert record.is_pending
    assert record.created_at is not None
    assert record.created_at.tzinfo is not None


def test_mark_sent_is_terminal(records) -> None:
    record = records.create(_pending())

    sent = records.mark_sent(record.id)

    assert sent.sent
    assert sent.sent_at is not None
    assert not sent.is_pending
    with pytest.raises(ValueError):
        records.mark_failed(record.id, "late error")
    with pytest.raises(ValueError):
        records.mark_sent(record.id)


def test_mark_failed_is_terminal(records) -> None:
    record = records.create(_pending(is_broadcast=True, recipient_id=None, batch_size=3))

    failed = records.mark_failed(record.id, "quota exceeded", failure_count=3)

    assert failed.error == "quota exceeded"
    assert failed.failure_count == 3
    assert not failed.sent
    with pytest.raises(ValueError):
        records.mark_sent(record.id)


def test_finalizing_unknown_record_raises(records) -> None:
    with pytest.raises(ValueError):
        records.mark_sent(999)


def test_list_recent_filters_by_recipient(records) -> None:
    records.create(_pending(recipient_id="u1"))
    records.create(_pending(recipient_id="u2"))

    assert [record.recipient_id for record in records.list_recent(recipient_id="u2")] == ["u2"]
    assert len(records.list_recent(limit=1)) == 1


def test_token_lookup(tokens) -> None:
    tokens.set_token("u1", "token-1", name="Asha")
    tokens.set_token("u2", "")
    tokens.set_token("u3", "token-3")

    assert tokens.get_token("u1") == "token-1"
    assert tokens.get_token("u2") is None
    assert tokens.get_token("missing") is None
    assert list(tokens.list_tokens()) == [("u1", "token-1"), ("u3", "token-3")]


def test_token_replacement(tokens) -> None:
    tokens.set_token("u1", "old")
    tokens.set_token("u1", "new")

    assert tokens.get_token("u1") == "new"


def test_shopping_list_reverse_index(session, tokens) -> None:
    for user_id in ("u1", "u2", "u3"):
        tokens.set_token(user_id, f"token-{user_id}")
    lists = ShoppingListRepository(session)
    lists.add_item("u1", "milk")
    lists.add_item("u1", "milk", quantity=2)
    lists.add_item("u2", "milk")
    lists.add_item("u3", "bread")

    assert lists.users_referencing_product("milk") == {"u1", "u2"}
    assert lists.users_referencing_product("eggs") == set()


def test_product_lookup(session) -> None:
    products = ProductRepository(session)
    products.save(Product(id="milk", name="Milk", price=9500))

    assert products.get_product("milk") == Product(id="milk", name="Milk", price=9500)
    assert products.get_product("bread") is None
