"""In-memory implementation of the Product repository.

Satisfies ``IProductRepository`` with an ordered list guarded by a
single re-entrant lock.  Every access to the list or the id counter
happens under the lock, so readers never observe a half-applied save
and id allocation stays strictly monotonic under concurrent requests.

Lookup misses follow the Null Object pattern: ``get_by_id`` returns
``None`` and ``delete`` returns ``False``; the request handler decides
how to present a missing product.
"""

from __future__ import annotations

import math
import threading
from typing import Iterable, List, Optional, Tuple

import structlog

from modules.products.constants import (
    FIELD_NAME,
    FIELD_PRICE,
    NAME_MAX_LENGTH,
    REASON_EMPTY,
    REASON_NEGATIVE,
    REASON_NOT_FINITE,
    REASON_NULL,
    REASON_TOO_LONG,
    REASON_ZERO,
    SEED_PRODUCTS,
)
from modules.products.exceptions import InvalidField, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductStore(IProductRepository):
    """Process-wide product catalog held in memory.

    Seeds the demo rows (Notebook, Mouse, Teclado) on construction
    unless ``seed=False``.  ``initial`` replaces the demo rows with
    other ``(name, price)`` pairs, numbered from 1 in order.
    """

    def __init__(
        self,
        seed: bool = True,
        initial: Optional[Iterable[Tuple[str, float]]] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._products: List[Product] = []
        self._next_id = 1

        rows = SEED_PRODUCTS if initial is None else tuple(initial)
        if seed:
            for name, price in rows:
                self._products.append(Product(name, price, id=self._allocate_id()))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by id, or ``None`` if absent."""
        with self._lock:
            return self._find(id)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, entity: Product) -> Product:
        """Insert a new product or update an existing one in place.

        Validation runs before any mutation, so a rejected product
        leaves the store untouched.

        Raises:
            InvalidField: if the product breaks a validation rule.
            ProductNotFound: if ``entity.id`` is set but unknown.
        """
        error = self.validate(entity)
        if error is not None:
            logger.warning(
                "product.validation_failed",
                field=error.field,
                reason=error.reason,
            )
            raise error

        with self._lock:
            if entity.id is None:
                entity.id = self._allocate_id()
                self._products.append(entity)
                logger.info("product.created", product_id=entity.id)
                return entity

            existing = self._find(entity.id)
            if existing is None:
                logger.warning("product.update_missing", product_id=entity.id)
                raise ProductNotFound(f"Product {entity.id} not found.")

            existing.name = entity.name
            existing.price = entity.price
            logger.info("product.updated", product_id=existing.id)
            return existing

    def delete(self, id: int) -> bool:
        """Remove a product by id.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given id.
        """
        with self._lock:
            existing = self._find(id)
            if existing is None:
                return False
            self._products.remove(existing)
        logger.info("product.deleted", product_id=id)
        return True

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, entity: Product) -> Optional[InvalidField]:
        """Return the first broken rule, checked in a fixed order.

        name present and not blank → name length → price present →
        price finite → price positive.
        """
        name = entity.name
        if name is None or not name.strip():
            return InvalidField(FIELD_NAME, REASON_EMPTY)
        if len(name) > NAME_MAX_LENGTH:
            return InvalidField(FIELD_NAME, REASON_TOO_LONG, limit=NAME_MAX_LENGTH)

        price = entity.price
        if price is None:
            return InvalidField(FIELD_PRICE, REASON_NULL)
        if not math.isfinite(price):
            return InvalidField(FIELD_PRICE, REASON_NOT_FINITE)
        if price < 0:
            return InvalidField(FIELD_PRICE, REASON_NEGATIVE)
        if price == 0:
            return InvalidField(FIELD_PRICE, REASON_ZERO)
        return None

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _allocate_id(self) -> int:
        allocated = self._next_id
        self._next_id += 1
        return allocated

    def _find(self, id: int) -> Optional[Product]:
        for product in self._products:
            if product.id == id:
                return product
        return None
