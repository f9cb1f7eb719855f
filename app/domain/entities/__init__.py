"""Domain entities exposed by the application."""

from .change_event import ChangeEvent, EventKind
from .notification_intent import IntentKind, NotificationIntent
from .notification_record import NotificationRecord
from .product import Product
from .push import BatchResult, PushResult
from .send_report import NotificationErrorKind, SendReport

__all__ = [
    "BatchResult",
    "ChangeEvent",
    "EventKind",
    "IntentKind",
    "NotificationErrorKind",
    "NotificationIntent",
    "NotificationRecord",
    "Product",
    "PushResult",
    "SendReport",
]
