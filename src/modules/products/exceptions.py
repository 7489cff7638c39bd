"""Product domain exceptions.

Raised by the Store when business rules are violated.
The request handler catches these and translates them into
user-safe flash messages; the raw text never reaches the user.
"""

from __future__ import annotations

from typing import Optional


class InvalidField(ValueError):
    """A product field failed validation.

    Carries structured data (``field``, ``reason``, optional ``limit``)
    so the handler can map it to a message without parsing text.
    """

    def __init__(self, field: str, reason: str, limit: Optional[int] = None) -> None:
        self.field = field
        self.reason = reason
        self.limit = limit
        detail = f"{field}: {reason}"
        if limit is not None:
            detail = f"{detail} (limit={limit})"
        super().__init__(detail)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidField):
            return NotImplemented
        return (self.field, self.reason, self.limit) == (
            other.field,
            other.reason,
            other.limit,
        )

    def __hash__(self) -> int:
        return hash((self.field, self.reason, self.limit))


class ProductNotFound(Exception):
    """A save targeted a product id that is not in the store."""
