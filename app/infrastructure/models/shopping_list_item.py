"""SQLAlchemy model for shopping list entries."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from app.infrastructure.database import Base


class ShoppingListItemModel(Base):
    """A product placed on a user's shopping list."""

    __tablename__ = "shopping_list_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_shopping_list_user_product"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(128), ForeignKey("users.id"), nullable=False, index=True)
    product_id = Column(String(128), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)


__all__ = ["ShoppingListItemModel"]
