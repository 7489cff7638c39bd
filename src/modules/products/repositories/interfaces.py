"""Product repository interface.

Extends ``IRepository[Product, int]`` with the validation hook and
the snapshot accessors the request handler relies on.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.exceptions import InvalidField
    from modules.products.models import Product


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product catalog."""

    @abstractmethod
    def list_all(self) -> List["Product"]:
        """Return a defensive copy of all products in insertion order."""

    @abstractmethod
    def validate(self, entity: "Product") -> Optional["InvalidField"]:
        """Return the first rule the product breaks, or ``None``."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""

    def list(self) -> List["Product"]:
        return self.list_all()
