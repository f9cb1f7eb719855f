"""SQLAlchemy model for catalog products."""

from sqlalchemy import Column, Integer, String

from app.infrastructure.database import Base


class ProductModel(Base):
    """Database representation of a catalog product.

    ``price`` is stored in minor currency units.
    """

    __tablename__ = "products"

    id = Column(String(128), primary_key=True)
    name = Column(String(200), nullable=False)
    price = Column(Integer, nullable=True)


__all__ = ["ProductModel"]
