"""Persistence helpers for catalog products."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.infrastructure.models import ProductModel


class ProductRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_product(self, product_id: str) -> Product | None:
        model = self.session.get(ProductModel, product_id)
        if model is None:
            return None
        return Product(id=model.id, name=model.name, price=model.price)

    def save(self, product: Product) -> Product:
        model = self.session.get(ProductModel, product.id)
        if model is None:
            model = ProductModel(id=product.id)
            self.session.add(model)
        model.name = product.name
        model.price = product.price
        self.session.commit()
        return product


__all__ = ["ProductRepository"]
