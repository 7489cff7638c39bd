"""Flash attributes: one-shot values carried across a redirect.

A view writes into ``request.flash.outgoing``; ``FlashMiddleware``
stores those values in the session when the response leaves, and the
next request finds them in ``request.flash.incoming``.  After that
request they are gone.

Values must be JSON-serializable (the session serializer is JSON).
"""

from __future__ import annotations

from typing import Any, Dict

FLASH_SESSION_KEY = "_flash"


class FlashAttributes:
    """Per-request view of the flash attributes stored in a session."""

    def __init__(self, incoming: Dict[str, Any]) -> None:
        self.incoming: Dict[str, Any] = dict(incoming)
        self.outgoing: Dict[str, Any] = {}

    @classmethod
    def consume(cls, session) -> FlashAttributes:
        """Pop the attributes left by the previous request."""
        return cls(session.pop(FLASH_SESSION_KEY, None) or {})

    def commit(self, session) -> None:
        if self.outgoing:
            session[FLASH_SESSION_KEY] = dict(self.outgoing)

    def get(self, key: str, default: Any = None) -> Any:
        return self.incoming.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.incoming
