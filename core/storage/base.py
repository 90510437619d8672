"""
Records and abstract base classes for storage backends.

Articles and users live in process memory. Products belong to an
external relational store and are only ever read through a
product repository.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Sequence


@dataclass(frozen=True)
class Article:
    """A user-submitted title/body text record."""
    id: int
    title: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "content": self.content}


@dataclass(frozen=True)
class User:
    """
    A registered account.

    The password is kept in plaintext for compatibility with the
    seeded demo accounts. It is excluded from to_dict() and from
    every API representation.
    """
    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {"username": self.username}


@dataclass(frozen=True)
class Product:
    """A catalog entry read from the products table."""
    id: int
    name: str
    description: str
    price: Decimal
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "quantity": self.quantity,
        }

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Product":
        """
        Decode a `SELECT * FROM products` row positionally.

        Column order: id, name, description, price, quantity.
        Raises ValueError when the row does not have that shape or
        the name is NULL.
        """
        if len(row) != 5:
            raise ValueError(f"Expected 5 columns, got {len(row)}")
        product_id, name, description, price, quantity = row
        if name is None:
            raise ValueError(f"Product {product_id} has no name")
        if isinstance(price, float):
            price = str(price)
        return cls(
            id=int(product_id),
            name=str(name),
            description="" if description is None else str(description),
            price=Decimal(price),
            quantity=int(quantity),
        )


class BaseProductRepository(ABC):
    """
    Abstract base class for the product catalog.

    Implementations must surface every backend failure as
    core.errors.StorageError so callers can answer with a 5xx
    instead of crashing the process.
    """

    @abstractmethod
    async def setup(self) -> None:
        """
        Prepare the backend (engines, pools).

        Must not raise when the backend is unreachable; failures are
        logged and reported again by list_products().
        """
        pass

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """
        Return every product, in backend order.

        Raises:
            StorageError: If the query or row decoding fails
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the backend answers."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        pass
