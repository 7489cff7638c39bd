from typing import Any, Dict

from django.http import HttpRequest


def flash(request: HttpRequest) -> Dict[str, Any]:
    """Expose the ``sucesso`` / ``erro`` flash messages to every template."""
    attributes = getattr(request, "flash", None)
    if attributes is None:
        return {}
    return {
        key: attributes.get(key)
        for key in ("sucesso", "erro")
        if key in attributes
    }
