"""Reverse lookups from products to the shopping lists that contain them."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.infrastructure.models import ShoppingListItemModel


class ShoppingListRepository:
    """Query shopping list items across every user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def users_referencing_product(self, product_id: str) -> set[str]:
        query = (
            self.session.query(ShoppingListItemModel.user_id)
            .filter(ShoppingListItemModel.product_id == product_id)
            .distinct()
        )
        return {user_id for (user_id,) in query.all()}

    def add_item(self, user_id: str, product_id: str, *, quantity: int = 1) -> None:
        existing = (
            self.session.query(ShoppingListItemModel)
            .filter(ShoppingListItemModel.user_id == user_id)
            .filter(ShoppingListItemModel.product_id == product_id)
            .one_or_none()
        )
        if existing is not None:
            existing.quantity = quantity
        else:
            self.session.add(
                ShoppingListItemModel(user_id=user_id, product_id=product_id, quantity=quantity)
            )
        self.session.commit()


__all__ = ["ShoppingListRepository"]
