"""Product entity.

Business rules implemented here:
- Assigning a negative price is rejected immediately.

``None``, NaN and infinite prices are accepted on assignment; the
store rejects them when the product is saved.  Constructor arguments
are stored as given, so a detached product can carry any value until
it is validated.
"""

from __future__ import annotations

from typing import Optional

from modules.products.constants import FIELD_PRICE, REASON_NEGATIVE
from modules.products.exceptions import InvalidField


class Product:
    """Mutable catalog record.  ``id is None`` means not yet saved."""

    def __init__(
        self,
        name: Optional[str] = None,
        price: Optional[float] = None,
        id: Optional[int] = None,
    ) -> None:
        self.id = id
        self.name = name
        self._price = price

    # ------------------------------------------------------------------
    # Price
    # ------------------------------------------------------------------

    @property
    def price(self) -> Optional[float]:
        return self._price

    @price.setter
    def price(self, value: Optional[float]) -> None:
        self.set_price(value)

    def set_price(self, value: Optional[float]) -> None:
        """Assign the price.

        Raises:
            InvalidField: if ``value`` is negative.
        """
        if value is not None and value < 0:
            raise InvalidField(FIELD_PRICE, REASON_NEGATIVE)
        self._price = value

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (self.id, self.name, self.price) == (other.id, other.name, other.price)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
