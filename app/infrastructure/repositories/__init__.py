"""Repository implementations for infrastructure layer."""

from .notification_record_repository import NotificationRecordRepository
from .product_repository import ProductRepository
from .shopping_list_repository import ShoppingListRepository
from .user_repository import UserTokenRepository

__all__ = [
    "NotificationRecordRepository",
    "ProductRepository",
    "ShoppingListRepository",
    "UserTokenRepository",
]
