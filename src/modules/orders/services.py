"""Order service layer (Use Cases).

Orchestrates the order lifecycle: creation, status management, shipping
updates, retrieval and deletion.  Every failure aborts the whole
operation; nothing is retried here.

Business rules enforced:
- The customer must exist in the customer directory.
- Each item must be available and is reserved with the inventory service,
  item by item in request order.  A failed creation releases whatever it
  had already reserved.
- All items must share one currency.
- ``tax = subtotal * TAX_RATE``; ``total = subtotal + tax``.
- Status transitions are validated against the state machine.
- Tracking details need an existing shipping address.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Optional, Tuple

import structlog

from modules.orders.constants import OrderStatus
from modules.orders.events import (
    OrderCanceled,
    OrderCreated,
    OrderDeleted,
    OrderStatusChanged,
    ShippingInfoUpdated,
)
from modules.orders.exceptions import (
    InvalidRequest,
    OrderNotFound,
    ProductUnavailable,
)
from modules.orders.models import Order, OrderItem

if TYPE_CHECKING:
    from modules.customers.providers.interfaces import ICustomerProvider
    from modules.inventory.providers.interfaces import IInventoryProvider
    from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the order repository and both providers via constructor
    injection (DIP).  ``event_bus`` is optional; without it domain events
    are dropped after each operation.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_provider: ICustomerProvider,
        inventory_provider: IInventoryProvider,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._customers = customer_provider
        self._inventory = inventory_provider
        self._event_bus = event_bus

    @property
    def customer_provider(self) -> ICustomerProvider:
        return self._customers

    @property
    def inventory_provider(self) -> IInventoryProvider:
        return self._inventory

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Place a new PENDING order.

        Steps:
        1. Resolve the customer.
        2. For each item, in order: fetch product, check availability,
           reserve.  The first unavailable item stops the loop.
        3. Snapshot prices, check currencies, derive totals.
        4. Store the order.

        Raises:
            CustomerNotFound: customer does not exist.
            ProductNotFound: a product does not exist.
            ProductUnavailable: not enough stock for an item.
            MixedCurrency: items resolved to different currencies.
        """
        log = logger.bind(customer_id=dto.customer_id, item_count=len(dto.items))
        log.info("order.creation_started")

        customer = self._customers.get_customer_by_id(dto.customer_id)

        reserved: List[Tuple[str, int]] = []
        try:
            order_items = [self._reserve_item(item, reserved) for item in dto.items]
            order = Order.place(
                customer_id=customer.id,
                items=order_items,
                shipping_address=dto.shipping_address,
            )
        except Exception as exc:
            log.warning(
                "order.creation_failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            self._release(reserved)
            raise

        order.add_domain_event(
            OrderCreated(
                aggregate_id=order.id,
                payload={"customer_id": order.customer_id, "total": str(order.total)},
            )
        )
        self._order_repo.save(order)
        self._dispatch(order)

        log.info(
            "order.created",
            order_id=order.id,
            subtotal=str(order.subtotal),
            total=str(order.total),
            currency=order.currency,
        )
        return order

    def update_order_status(self, order_id: str, new_status: str) -> Order:
        """Transition an order to a new status.

        Raises:
            OrderNotFound: order does not exist.
            InvalidStatusTransition: transition is not allowed.
        """
        self._ensure_exists(order_id)
        with self._order_repo.lock(order_id):
            order = self.get_order(order_id)
            log = logger.bind(
                order_id=order_id,
                current_status=str(order.status),
                new_status=str(new_status),
            )
            try:
                old_status = order.transition_to(new_status)
            except InvalidRequest:
                log.warning("order.invalid_transition")
                raise

            payload = {"old_status": str(old_status), "new_status": str(new_status)}
            order.add_domain_event(
                OrderStatusChanged(aggregate_id=order.id, payload=payload)
            )
            if new_status == OrderStatus.CANCELED:
                order.add_domain_event(
                    OrderCanceled(aggregate_id=order.id, payload=payload)
                )
            self._order_repo.save(order)

        log.info("order.status_updated")
        self._dispatch(order)
        return order

    def update_shipping_info(
        self,
        order_id: str,
        tracking_company: str,
        tracking_number: str,
        estimated_delivery_date: Optional[date] = None,
    ) -> Order:
        """Replace the tracking details of an order.

        Allowed in every status, terminal ones included.

        Raises:
            OrderNotFound: order does not exist.
            MissingShippingAddress: the order has no shipping address.
        """
        self._ensure_exists(order_id)
        with self._order_repo.lock(order_id):
            order = self.get_order(order_id)
            log = logger.bind(order_id=order_id, status=str(order.status))
            try:
                order.update_tracking(
                    tracking_company=tracking_company,
                    tracking_number=tracking_number,
                    estimated_delivery_date=estimated_delivery_date,
                )
            except InvalidRequest:
                log.warning("order.shipping_address_missing")
                raise

            order.add_domain_event(
                ShippingInfoUpdated(
                    aggregate_id=order.id,
                    payload={
                        "tracking_company": tracking_company,
                        "tracking_number": tracking_number,
                    },
                )
            )
            self._order_repo.save(order)

        log.info("order.shipping_updated", tracking_company=tracking_company)
        self._dispatch(order)
        return order

    def delete_order(self, order_id: str) -> None:
        """Remove an order from the store.

        Inventory reservations held by the order are left untouched.

        Raises:
            OrderNotFound: order does not exist.
        """
        self._ensure_exists(order_id)
        with self._order_repo.lock(order_id):
            if not self._order_repo.delete(order_id):
                logger.warning("order.delete_not_found", order_id=order_id)
                raise OrderNotFound(f"Order not found: {order_id}")

        logger.info("order.deleted", order_id=order_id)
        if self._event_bus is not None:
            self._event_bus.publish(OrderDeleted(aggregate_id=order_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order not found: {order_id}")
        return order

    def list_orders(self) -> List[Order]:
        return self._order_repo.list()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_exists(self, order_id: str) -> None:
        if not self._order_repo.exists(order_id):
            logger.warning("order.not_found", order_id=order_id)
            raise OrderNotFound(f"Order not found: {order_id}")

    def _reserve_item(
        self, item: CreateOrderItemDTO, reserved: List[Tuple[str, int]]
    ) -> OrderItem:
        product = self._inventory.get_product_by_id(item.product_id)

        if not self._inventory.check_product_availability(
            item.product_id, item.quantity
        ):
            raise ProductUnavailable(item.product_id)
        # The stock can be taken between the check and the reservation.
        if not self._inventory.reserve_products(item.product_id, item.quantity):
            raise ProductUnavailable(item.product_id)
        reserved.append((item.product_id, item.quantity))

        return OrderItem(
            product_id=item.product_id,
            variant_id=item.variant_id,
            quantity=item.quantity,
            price=product.price,
            currency=product.currency,
        )

    def _release(self, reserved: List[Tuple[str, int]]) -> None:
        """Give back reservations made by a failed creation.

        A failing release is logged and skipped so the caller still sees
        the error that aborted the creation.
        """
        released = 0
        for product_id, quantity in reversed(reserved):
            try:
                self._inventory.release_products(product_id, quantity)
            except Exception:
                logger.exception(
                    "order.reservation_release_failed",
                    product_id=product_id,
                    quantity=quantity,
                )
                continue
            released += 1
        if reserved:
            logger.info(
                "order.reservations_released",
                count=released,
                failed=len(reserved) - released,
            )

    def _dispatch(self, order: Order) -> None:
        events = order.pull_domain_events()
        if self._event_bus is not None:
            self._event_bus.publish_all(events)
