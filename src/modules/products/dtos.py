"""Product form DTO.

Framework-agnostic data transfer object using Pydantic v2.
It is the contract between the HTML form (field names ``id``,
``nome``, ``preco``) and the request handler, which works on
``Product`` entities.  DTOs are immutable (``frozen=True``).

Binding rules:
- ``nome`` is kept verbatim; only a missing field becomes ``None``.
- blank ``id`` / ``preco`` become ``None``.
- ``preco`` must parse as a float and ``id`` as an int; anything else
  fails binding with ``pydantic.ValidationError``.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from modules.products.models import Product


class ProductFormDTO(BaseModel):
    """Immutable DTO for the product form."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    nome: Optional[str] = None
    preco: Optional[float] = None

    @field_validator("id", "preco", mode="before")
    @classmethod
    def blank_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_serializer("preco")
    def serialize_preco(self, v: Optional[float]) -> Optional[float]:
        if v is None or not math.isfinite(v):
            return None
        return v

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> ProductFormDTO:
        """Bind submitted form fields (e.g. a Django ``QueryDict``)."""
        return cls(
            id=data.get("id"),
            nome=data.get("nome"),
            preco=data.get("preco"),
        )

    @classmethod
    def from_entity(cls, product: Product) -> ProductFormDTO:
        """Build a DTO from a Product instance."""
        return cls(id=product.id, nome=product.name, preco=product.price)

    def to_entity(self) -> Product:
        """Build a detached Product carrying the submitted values."""
        return Product(self.nome, self.preco, id=self.id)
