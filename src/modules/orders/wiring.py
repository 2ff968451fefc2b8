"""Composition root for the order service.

Builds one process-wide ``OrderService`` from the ``ORDERS`` settings so
that every request shares the same order store and providers.
"""

from __future__ import annotations

from functools import lru_cache

import structlog
from django.conf import settings
from django.utils.module_loading import import_string

from modules.orders.services import OrderService
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=None)
def get_order_service() -> OrderService:
    conf = settings.ORDERS
    service = OrderService(
        order_repository=import_string(conf["ORDER_REPOSITORY"])(),
        customer_provider=import_string(conf["CUSTOMER_PROVIDER"])(),
        inventory_provider=import_string(conf["INVENTORY_PROVIDER"])(),
        event_bus=event_bus,
    )
    logger.info(
        "order_service.configured",
        order_repository=conf["ORDER_REPOSITORY"],
        customer_provider=conf["CUSTOMER_PROVIDER"],
        inventory_provider=conf["INVENTORY_PROVIDER"],
    )
    return service


def reset_order_service() -> None:
    """Drop the cached service; the next call builds a fresh one."""
    get_order_service.cache_clear()
