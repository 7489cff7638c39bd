"""Product URL configuration."""

from __future__ import annotations

from django.urls import path, register_converter

from modules.products.views import (
    product_delete,
    product_edit,
    product_list,
    product_new,
    product_save,
)


class SignedIntConverter:
    """Like ``<int:...>`` but also matches ``0`` and negatives.

    Out-of-range ids must reach the handler, which answers with
    "ID do produto inválido." instead of a 404.
    """

    regex = "-?[0-9]+"

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value: int) -> str:
        return str(value)


register_converter(SignedIntConverter, "signed")

urlpatterns = [
    path("listar", product_list, name="product_list"),
    path("cadastrar", product_new, name="product_new"),
    path("salvar", product_save, name="product_save"),
    path("editar/<signed:id>", product_edit, name="product_edit"),
    path("excluir/<signed:id>", product_delete, name="product_delete"),
]
