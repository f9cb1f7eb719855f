"""Domain entity for catalog products referenced by price alerts."""

from dataclasses import dataclass


@dataclass
class Product:
    """Product as seen by notification routing."""

    id: str
    name: str
    price: int | None = None


__all__ = ["Product"]
