"""ORM models used by the application infrastructure."""

from .notification_record import NotificationRecordModel
from .product import ProductModel
from .shopping_list_item import ShoppingListItemModel
from .user import UserModel

__all__ = [
    "NotificationRecordModel",
    "ProductModel",
    "ShoppingListItemModel",
    "UserModel",
]
