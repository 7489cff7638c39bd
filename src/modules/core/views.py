import time
from typing import Any, Dict

import structlog
from django.apps import apps
from django.http import HttpRequest, HttpResponseRedirect, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check the in-memory catalog
    try:
        start = time.monotonic()
        store = apps.get_app_config("products").store
        products = store.count()
        services["catalog"] = {
            "status": "up",
            "products": products,
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["catalog"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_catalog_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def home(request: HttpRequest) -> HttpResponseRedirect:
    return HttpResponseRedirect("/produtos/listar")
