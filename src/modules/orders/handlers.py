"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.orders.events import (
    OrderCanceled,
    OrderCreated,
    OrderDeleted,
    OrderStatusChanged,
    ShippingInfoUpdated,
)
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class OrderCreatedHandler(IEventHandler[OrderCreated]):
    def handle(self, event: OrderCreated) -> None:
        logger.info(
            f"Handling creation of order {event.aggregate_id}",
            order_id=event.aggregate_id,
            total=event.payload.get("total"),
        )


class OrderStatusChangedHandler(IEventHandler[OrderStatusChanged]):
    def handle(self, event: OrderStatusChanged) -> None:
        logger.info(
            f"Handling status change of order {event.aggregate_id}",
            order_id=event.aggregate_id,
            old_status=event.payload.get("old_status"),
            new_status=event.payload.get("new_status"),
        )


class OrderCanceledHandler(IEventHandler[OrderCanceled]):
    def handle(self, event: OrderCanceled) -> None:
        # Inventory reservations are left in place on cancel.
        logger.info(
            f"Handling cancellation of order {event.aggregate_id}",
            order_id=event.aggregate_id,
        )


class ShippingInfoUpdatedHandler(IEventHandler[ShippingInfoUpdated]):
    def handle(self, event: ShippingInfoUpdated) -> None:
        logger.info(
            f"Handling shipping update of order {event.aggregate_id}",
            order_id=event.aggregate_id,
            tracking_company=event.payload.get("tracking_company"),
        )


class OrderDeletedHandler(IEventHandler[OrderDeleted]):
    def handle(self, event: OrderDeleted) -> None:
        logger.info(
            f"Handling deletion of order {event.aggregate_id}",
            order_id=event.aggregate_id,
        )


order_created_handler = OrderCreatedHandler()
order_status_changed_handler = OrderStatusChangedHandler()
order_canceled_handler = OrderCanceledHandler()
shipping_info_updated_handler = ShippingInfoUpdatedHandler()
order_deleted_handler = OrderDeletedHandler()
