"""User-facing messages for the product pages.

``message_for`` turns a validation error into one of a closed set of
pt-BR messages.  It is total: every input, including ``None`` and
arbitrary text, yields a non-empty message, and the internal error
text is never part of the output.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from modules.products.constants import (
    FIELD_NAME,
    FIELD_PRICE,
    REASON_EMPTY,
    REASON_NEGATIVE,
    REASON_NULL,
    REASON_TOO_LONG,
    REASON_ZERO,
)
from modules.products.exceptions import InvalidField

# ---------------------------------------------------------------------------
# Flash messages
# ---------------------------------------------------------------------------

SAVE_SUCCESS = "Produto salvo com sucesso!"
DELETE_SUCCESS = "Produto removido do estoque com sucesso!"

INVALID_FORM = "Dados do produto inválidos. Por favor, preencha todos os campos."
SAVE_UNEXPECTED = "Erro ao processar a solicitação. Por favor, tente novamente."

INVALID_ID = "ID do produto inválido."
EDIT_NOT_FOUND = "Produto não encontrado. Ele pode ter sido removido."
EDIT_UNEXPECTED = "Erro ao carregar o produto. Tente novamente."
DELETE_NOT_FOUND = "Produto não encontrado. Ele pode ter sido removido anteriormente."
DELETE_UNEXPECTED = "Erro ao remover o produto. Tente novamente."

# ---------------------------------------------------------------------------
# Validation messages
# ---------------------------------------------------------------------------

NAME_EMPTY = "Nome do produto é obrigatório. Por favor, insira um nome válido."
NAME_NULL = "Nome do produto é obrigatório."
NAME_TOO_LONG = "Nome do produto muito longo. Use no máximo 255 caracteres."
PRICE_NEGATIVE = (
    "Preço deve ser um valor positivo. Por favor, insira um preço maior que zero."
)
PRICE_ZERO = "Preço deve ser maior que zero."
PRICE_NULL = "Preço é obrigatório. Por favor, insira um valor."
GENERIC_INVALID = "Dados inválidos. Por favor, verifique e tente novamente."

_BY_FIELD_REASON: Dict[Tuple[str, str], str] = {
    (FIELD_NAME, REASON_EMPTY): NAME_EMPTY,
    (FIELD_NAME, REASON_TOO_LONG): NAME_TOO_LONG,
    (FIELD_PRICE, REASON_NEGATIVE): PRICE_NEGATIVE,
    (FIELD_PRICE, REASON_ZERO): PRICE_ZERO,
    (FIELD_PRICE, REASON_NULL): PRICE_NULL,
}


def message_for(error: Union[InvalidField, str, None]) -> str:
    """Map a validation error to a user-safe message."""
    if isinstance(error, InvalidField):
        return _BY_FIELD_REASON.get((error.field, error.reason), GENERIC_INVALID)
    if isinstance(error, str):
        return _message_for_text(error)
    return GENERIC_INVALID


def _message_for_text(text: Optional[str]) -> str:
    """Classify legacy free-text errors by keyword.

    Rules are checked in order; the first match wins.
    """
    if not text or not text.strip():
        return GENERIC_INVALID

    lowered = text.lower()
    mentions_name = "nome" in lowered
    mentions_price = "preço" in lowered or "preco" in lowered

    if mentions_name and ("vazio" in lowered or "espaço" in lowered):
        return NAME_EMPTY
    if mentions_price and "negativo" in lowered:
        return PRICE_NEGATIVE
    if mentions_price and "zero" in lowered:
        return PRICE_ZERO
    if mentions_price and ("null" in lowered or "nulo" in lowered):
        return PRICE_NULL
    if mentions_name and ("null" in lowered or "nulo" in lowered):
        return NAME_NULL
    if "tamanho" in lowered or "exceder" in lowered or "limite" in lowered:
        return NAME_TOO_LONG
    return GENERIC_INVALID
