"""Product domain constants.

Field names and validation reasons carried by ``InvalidField``,
the name length limit and the demo rows seeded into a fresh store.
"""

NAME_MAX_LENGTH = 255

FIELD_NAME = "name"
FIELD_PRICE = "price"

REASON_NULL = "null"
REASON_EMPTY = "empty"
REASON_TOO_LONG = "too_long"
REASON_NOT_FINITE = "not_finite"
REASON_NEGATIVE = "negative"
REASON_ZERO = "zero"

SEED_PRODUCTS: tuple[tuple[str, float], ...] = (
    ("Notebook", 3000.0),
    ("Mouse", 50.0),
    ("Teclado", 150.0),
)
