"""Request handler for the product pages (Use Cases).

Translates page requests into ``IProductRepository`` calls and store
outcomes into view names, redirects and flash messages.  The handler
knows nothing about Django: the host passes two plain mappings, the
*model* (template context) and the *flash* (attributes that survive
exactly one redirect), and interprets the returned ``ViewResult``.

Error policy:
- ``InvalidField`` is mapped through ``message_for``.
- Every other exception is logged and replaced with a generic
  message; internal error text never reaches the flash.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Union

import structlog

from modules.products import messages
from modules.products.exceptions import InvalidField, ProductNotFound
from modules.products.messages import message_for
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

LIST_URL = "/produtos/listar"
NEW_URL = "/produtos/cadastrar"

VIEW_LIST = "listar"
VIEW_FORM = "form"


@dataclass(frozen=True)
class Redirect:
    """Instructs the host to answer with a redirect to ``url``."""

    url: str


ViewResult = Union[str, Redirect]
Sink = MutableMapping[str, Any]


class ProductRequestHandler:
    """Handles the five product page operations.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, store: IProductRepository) -> None:
        self._store = store

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def list(self, model: Sink) -> ViewResult:
        """GET /produtos/listar"""
        model["produtos"] = self._store.list_all()
        return VIEW_LIST

    def new_form(self, model: Sink) -> ViewResult:
        """GET /produtos/cadastrar"""
        model["produto"] = Product()
        return VIEW_FORM

    def edit_form(self, id: Optional[int], model: Sink, flash: Sink) -> ViewResult:
        """GET /produtos/editar/{id}"""
        log = logger.bind(product_id=id)
        try:
            if not _is_valid_id(id):
                flash["erro"] = messages.INVALID_ID
                return Redirect(LIST_URL)

            product = self._store.get_by_id(id)
            if product is None:
                log.info("product.edit_not_found")
                flash["erro"] = messages.EDIT_NOT_FOUND
                return Redirect(LIST_URL)

            model["produto"] = product
            return VIEW_FORM
        except Exception:
            log.exception("product.edit_failed")
            flash["erro"] = messages.EDIT_UNEXPECTED
            return Redirect(LIST_URL)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, product: Optional[Product], flash: Sink) -> ViewResult:
        """POST /produtos/salvar

        On failure the submitted product is flashed back under
        ``produto`` so the form can be repopulated.
        """
        if product is None:
            flash["erro"] = messages.INVALID_FORM
            return Redirect(NEW_URL)

        log = logger.bind(product_id=product.id)
        try:
            self._store.save(product)
        except InvalidField as exc:
            log.info("product.save_rejected", field=exc.field, reason=exc.reason)
            flash["erro"] = message_for(exc)
            flash["produto"] = product
            return Redirect(NEW_URL)
        except ProductNotFound:
            log.info("product.save_not_found")
            flash["erro"] = messages.EDIT_NOT_FOUND
            return Redirect(LIST_URL)
        except Exception:
            log.exception("product.save_failed")
            flash["erro"] = messages.SAVE_UNEXPECTED
            flash["produto"] = product
            return Redirect(NEW_URL)

        flash["sucesso"] = messages.SAVE_SUCCESS
        return Redirect(LIST_URL)

    def delete(self, id: Optional[int], flash: Sink) -> ViewResult:
        """GET /produtos/excluir/{id}"""
        log = logger.bind(product_id=id)
        try:
            if not _is_valid_id(id):
                flash["erro"] = messages.INVALID_ID
            elif self._store.delete(id):
                flash["sucesso"] = messages.DELETE_SUCCESS
            else:
                log.info("product.delete_not_found")
                flash["erro"] = messages.DELETE_NOT_FOUND
        except Exception:
            log.exception("product.delete_failed")
            flash["erro"] = messages.DELETE_UNEXPECTED
        return Redirect(LIST_URL)


def _is_valid_id(id: Optional[int]) -> bool:
    return id is not None and id > 0
