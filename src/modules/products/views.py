"""Product page views.

Thin Django adapters around ``ProductRequestHandler``: they bind the
request, hand the handler a model dict and a flash dict, then render
the returned view name or follow the returned redirect.  All product
logic, including error handling, lives in the handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.apps import apps
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST
from pydantic import ValidationError as PydanticValidationError

from modules.products.dtos import ProductFormDTO
from modules.products.handlers import (
    VIEW_FORM,
    ProductRequestHandler,
    Redirect,
    ViewResult,
)
from modules.products.models import Product

logger = structlog.get_logger(__name__)


def _handler() -> ProductRequestHandler:
    return apps.get_app_config("products").handler


# ------------------------------------------------------------------
# Pages
# ------------------------------------------------------------------


@require_GET
def product_list(request: HttpRequest) -> HttpResponse:
    model: Dict[str, Any] = {}
    return _respond(request, _handler().list(model), model, {})


@require_GET
def product_new(request: HttpRequest) -> HttpResponse:
    model: Dict[str, Any] = {}
    return _respond(request, _handler().new_form(model), model, {})


@require_GET
def product_edit(request: HttpRequest, id: int) -> HttpResponse:
    model: Dict[str, Any] = {}
    flash: Dict[str, Any] = {}
    return _respond(request, _handler().edit_form(id, model, flash), model, flash)


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------


@require_POST
def product_save(request: HttpRequest) -> HttpResponse:
    flash: Dict[str, Any] = {}
    return _respond(request, _handler().save(_bind(request), flash), {}, flash)


@require_GET
def product_delete(request: HttpRequest, id: int) -> HttpResponse:
    flash: Dict[str, Any] = {}
    return _respond(request, _handler().delete(id, flash), {}, flash)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _bind(request: HttpRequest) -> Optional[Product]:
    """Bind the submitted form, or ``None`` if it cannot be bound."""
    try:
        return ProductFormDTO.from_form(request.POST).to_entity()
    except PydanticValidationError as exc:
        logger.info(
            "product.form_unbound",
            fields=sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]}),
        )
        return None


def _respond(
    request: HttpRequest,
    result: ViewResult,
    model: Dict[str, Any],
    flash: Dict[str, Any],
) -> HttpResponse:
    for key, value in flash.items():
        if isinstance(value, Product):
            value = ProductFormDTO.from_entity(value).model_dump()
        request.flash.outgoing[key] = value

    if isinstance(result, Redirect):
        return HttpResponseRedirect(result.url)

    # A product flashed back by a failed save repopulates the form.
    flashed = request.flash.get("produto")
    if result == VIEW_FORM and flashed is not None:
        model["produto"] = ProductFormDTO.model_validate(flashed).to_entity()
    return render(request, f"products/{result}.html", model)
