import time
import uuid
from typing import Callable, Optional

import structlog
from django.http import HttpRequest, HttpResponse

from modules.core.flash import FlashAttributes

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Tags every log line of a request with a correlation id.

    Honors an incoming ``X-Request-ID`` (a new UUID4 otherwise), binds it
    to the structlog context vars and echoes it on the response.  The
    closing ``request_finished`` event names the matched route
    (``product_save``, ``product_edit``...) and is logged as a warning
    for 4xx and an error for 5xx answers.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        logger.info("request_started", method=request.method, path=request.path)

        response = self.get_response(request)

        log = _level_for(response.status_code)
        log(
            "request_finished",
            method=request.method,
            path=request.path,
            route=_route_name(request),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response


def _route_name(request: HttpRequest) -> Optional[str]:
    match = getattr(request, "resolver_match", None)
    return match.url_name if match is not None else None


def _level_for(status_code: int) -> Callable[..., None]:
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


class FlashMiddleware:
    """Loads flash attributes from the session and saves the new ones.

    Must run after ``SessionMiddleware``.  Exposes ``request.flash``
    (a ``FlashAttributes``) to views and context processors.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.flash = FlashAttributes.consume(request.session)
        response = self.get_response(request)
        request.flash.commit(request.session)
        return response
