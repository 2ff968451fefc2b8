import time
from typing import Any, Callable, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.orders.wiring import get_order_service

logger = structlog.get_logger(__name__)


def _probe(check: Callable[[], bool]) -> Dict[str, Any]:
    start = time.monotonic()
    try:
        up = bool(check())
    except Exception:
        logger.exception("health_check_probe_failed")
        up = False
    if not up:
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Report whether the external providers answer."""
    service = get_order_service()
    services = {
        "customers": _probe(service.customer_provider.ping),
        "inventory": _probe(service.inventory_provider.ping),
    }
    healthy = all(s["status"] == "up" for s in services.values())

    logger.info("health_check_completed", status="healthy" if healthy else "unhealthy")

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
