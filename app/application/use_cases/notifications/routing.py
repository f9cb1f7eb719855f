"""Classification of document change events into notification intents."""

from __future__ import annotations

import functools
import logging
import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Final

from app.domain.entities import (
    ChangeEvent,
    IntentKind,
    NotificationErrorKind,
    NotificationIntent,
)
from app.domain.ports import ProductCatalog, ShoppingListIndex

from .triggers import TriggerTable

logger = logging.getLogger(__name__)

NOTIFICATIONS_PATH: Final[str] = "notifications/{notificationId}"
ORDERS_PATH: Final[str] = "orders/{orderId}"
PRICE_HISTORY_PATH: Final[str] = "products/{productId}/price_history/{historyId}"

ORDER_UPDATE_TITLE: Final[str] = "Order Update"
PRICE_DROP_TITLE: Final[str] = "🎉 Price Drop Alert!"

ORDER_STATUS_MESSAGES: Final[Mapping[str, str]] = {
    "confirmed": "Your order has been confirmed!",
    "preparing": "Your order is being prepared",
    "packed": "Your order has been packed",
    "outForDelivery": "Your order is out for delivery!",
    "delivered": "Your order has been delivered",
    "cancelled": "Your order has been cancelled",
}
DEFAULT_ORDER_STATUS_MESSAGE: Final[str] = "Your order status has been updated"


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _as_number(value: Any) -> float | None:
    """Return ``value`` as a finite float, or ``None`` when it is not one."""

    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _stringify(data: Any) -> dict[str, str]:
    if not isinstance(data, Mapping):
        return {}
    return {str(key): str(value) for key, value in data.items() if value is not None}


def format_percent(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` and with at most two decimals."""

    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0")


def format_price(minor_units: Any, currency_symbol: str) -> str:
    """Format an integer amount of minor currency units, e.g. ``9000 -> ₹90.00``."""

    try:
        amount = Decimal(str(minor_units)) / Decimal(100)
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Invalid price value: {minor_units!r}") from exc
    return f"{currency_symbol}{amount:.2f}"


def classify_direct(
    event: ChangeEvent, params: Mapping[str, str]
) -> NotificationIntent | None:
    """Notification documents addressed to one user with a device token."""

    user_id = event.after("userId")
    token = event.after("token")
    if not (_present(user_id) and _present(token)):
        return None

    recipient = str(user_id)
    return NotificationIntent(
        kind=IntentKind.DIRECT,
        recipients=frozenset({recipient}),
        title=str(event.after("title") or ""),
        body=str(event.after("body") or ""),
        payload=_stringify(event.after("data")),
        tokens={recipient: str(token)},
        source_path=event.document_path,
    )


def classify_broadcast(
    event: ChangeEvent, params: Mapping[str, str], *, title: str
) -> NotificationIntent | None:
    """Notification documents carrying a ``message`` and no target user."""

    message = event.after("message")
    if not _present(message) or _present(event.after("userId")):
        return None

    return NotificationIntent(
        kind=IntentKind.BROADCAST,
        title=title,
        body=str(message),
        source_path=event.document_path,
    )


def classify_order_status(
    event: ChangeEvent, params: Mapping[str, str]
) -> NotificationIntent | None:
    """Order updates whose ``status`` field changed."""

    status = event.after("status")
    if event.before("status") == status:
        return None

    user_id = event.after("userId")
    if not _present(user_id):
        logger.info(
            "Order %s changed status without a userId (%s)",
            params.get("orderId"),
            NotificationErrorKind.NO_RECIPIENTS.value,
        )
        return None

    status_key = "" if status is None else str(status)
    return NotificationIntent(
        kind=IntentKind.STATUS_CHANGE,
        recipients=frozenset({str(user_id)}),
        title=ORDER_UPDATE_TITLE,
        body=ORDER_STATUS_MESSAGES.get(status_key, DEFAULT_ORDER_STATUS_MESSAGE),
        payload={
            "orderId": params.get("orderId", ""),
            "status": status_key,
            "type": "order_update",
        },
        source_path=event.document_path,
    )


def classify_price_drop(
    event: ChangeEvent,
    params: Mapping[str, str],
    *,
    catalog: ProductCatalog,
    shopping_lists: ShoppingListIndex,
    currency_symbol: str,
) -> NotificationIntent | None:
    """Price history entries recording a decrease for a listed product."""

    change = _as_number(event.after("changeAmount"))
    if change is None:
        change = _as_number(event.after("change"))
    if change is None or change >= 0:
        return None

    product_id = params["productId"]
    product = catalog.get_product(product_id)
    if product is None:
        logger.info(
            "Price drop for product %s ignored (%s)",
            product_id,
            NotificationErrorKind.MISSING_REFERENCED_DOCUMENT.value,
        )
        return None

    user_ids = shopping_lists.users_referencing_product(product_id)
    if not user_ids:
        logger.info(
            "No shopping list references product %s (%s)",
            product_id,
            NotificationErrorKind.NO_RECIPIENTS.value,
        )
        return None

    new_price = _as_number(event.after("newPrice"))
    if new_price is None:
        new_price = _as_number(product.price)

    percent = _as_number(event.after("changePercent"))
    if percent is None and new_price is not None:
        old_price = new_price - change
        percent = change / old_price * 100 if old_price else None

    name = product.name or product_id
    if percent is None:
        body = f"{name} is now cheaper!"
    else:
        body = f"{name} is now {format_percent(abs(percent))}% off!"
    if new_price is not None:
        body = f"{body} New price: {format_price(new_price, currency_symbol)}"

    return NotificationIntent(
        kind=IntentKind.PRICE_DROP,
        recipients=frozenset(user_ids),
        title=PRICE_DROP_TITLE,
        body=body,
        payload={"productId": product_id, "type": "price_drop"},
        source_path=event.document_path,
    )


class NotificationRouter:
    """Decide whether, and to whom, a change event should be notified.

    Routing only reads from the catalog and the shopping list index; it never
    sends or persists anything, so results depend solely on the event and
    those lookups.
    """

    def __init__(
        self,
        *,
        catalog: ProductCatalog,
        shopping_lists: ShoppingListIndex,
        broadcast_title: str = "SmartCart",
        currency_symbol: str = "₹",
        triggers: TriggerTable | None = None,
    ) -> None:
        self._catalog = catalog
        self._shopping_lists = shopping_lists
        self._broadcast_title = broadcast_title
        self._currency_symbol = currency_symbol
        self.triggers = triggers if triggers is not None else self._default_triggers()

    def _default_triggers(self) -> TriggerTable:
        table = TriggerTable()
        table.on_document_created(NOTIFICATIONS_PATH, classify_direct)
        table.on_document_created(
            NOTIFICATIONS_PATH,
            functools.partial(classify_broadcast, title=self._broadcast_title),
        )
        table.on_document_updated(ORDERS_PATH, classify_order_status)
        table.on_document_created(
            PRICE_HISTORY_PATH,
            functools.partial(
                classify_price_drop,
                catalog=self._catalog,
                shopping_lists=self._shopping_lists,
                currency_symbol=self._currency_symbol,
            ),
        )
        return table

    def route(self, event: ChangeEvent) -> NotificationIntent | None:
        """Return the first intent produced by a handler bound to ``event``."""

        for handler, params in self.triggers.match(event):
            intent = handler(event, params)
            if intent is not None:
                return intent
        return None


__all__ = [
    "DEFAULT_ORDER_STATUS_MESSAGE",
    "NOTIFICATIONS_PATH",
    "NotificationRouter",
    "ORDERS_PATH",
    "ORDER_STATUS_MESSAGES",
    "ORDER_UPDATE_TITLE",
    "PRICE_DROP_TITLE",
    "PRICE_HISTORY_PATH",
    "classify_broadcast",
    "classify_direct",
    "classify_order_status",
    "classify_price_drop",
    "format_percent",
    "format_price",
]
