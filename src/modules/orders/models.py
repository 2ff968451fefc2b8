"""Order, OrderItem and ShippingInfo domain entities.

Business rules implemented:
- OrderItem snapshots product price and currency at creation time; it is
  never re-priced afterwards.
- ``subtotal``, ``tax`` and ``total`` are derived once in ``Order.place``.
- Status only changes through ``transition_to`` (see ``VALID_TRANSITIONS``).
- The shipping address is fixed at creation; tracking details are replaced
  wholesale by ``update_tracking``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence, Tuple

import uuid6
from django.utils import timezone

from modules.orders.constants import (
    TAX_RATE,
    TERMINAL_STATES,
    OrderStatus,
    can_transition,
)
from modules.orders.exceptions import (
    InvalidStatusTransition,
    MissingShippingAddress,
    MixedCurrency,
)
from shared.domain.events import DomainEventMixin
from shared.domain.value_objects import Address


@dataclass(frozen=True)
class OrderItem:
    """Line item with price and currency snapshotted from inventory."""

    product_id: str
    variant_id: str
    quantity: int
    price: Decimal
    currency: str

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class ShippingInfo:
    shipping_address: Optional[Address]
    tracking_company: str = ""
    tracking_number: str = ""
    estimated_delivery_date: Optional[date] = None


@dataclass(eq=False)
class Order(DomainEventMixin):
    """Order aggregate root.

    ``id`` is a UUIDv7 string, so identifiers sort by creation time.
    """

    id: str
    customer_id: str
    items: Tuple[OrderItem, ...]
    status: str
    shipping_info: Optional[ShippingInfo]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    currency: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def place(
        cls,
        customer_id: str,
        items: Sequence[OrderItem],
        shipping_address: Address,
    ) -> Order:
        """Build a new PENDING order and derive its totals.

        Raises:
            MixedCurrency: items resolved to more than one currency.
        """
        currencies = {item.currency for item in items}
        if len(currencies) > 1:
            raise MixedCurrency(currencies)

        subtotal = sum((item.line_total for item in items), Decimal("0"))
        tax = subtotal * TAX_RATE
        now = timezone.now()
        return cls(
            id=str(uuid6.uuid7()),
            customer_id=customer_id,
            items=tuple(items),
            status=OrderStatus.PENDING,
            shipping_info=ShippingInfo(shipping_address=shipping_address),
            subtotal=subtotal,
            tax=tax,
            total=subtotal + tax,
            currency=items[0].currency,
            created_at=now,
            updated_at=now,
        )

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        return can_transition(self.status, new_status)

    def transition_to(self, new_status: str) -> str:
        """Move to ``new_status`` and return the previous status.

        Raises:
            InvalidStatusTransition: the move is not in the transition table.
        """
        if not self.can_transition_to(new_status):
            raise InvalidStatusTransition(str(self.status), str(new_status))
        old_status = self.status
        self.status = new_status
        self.touch()
        return old_status

    # ------------------------------------------------------------------
    # Shipping
    # ------------------------------------------------------------------

    def update_tracking(
        self,
        tracking_company: str,
        tracking_number: str,
        estimated_delivery_date: Optional[date] = None,
    ) -> None:
        """Replace tracking details, keeping the original address.

        An omitted ``estimated_delivery_date`` clears any previous estimate.

        Raises:
            MissingShippingAddress: the order has no address to ship to.
        """
        if self.shipping_info is None or self.shipping_info.shipping_address is None:
            raise MissingShippingAddress(self.id)
        self.shipping_info = ShippingInfo(
            shipping_address=self.shipping_info.shipping_address,
            tracking_company=tracking_company,
            tracking_number=tracking_number,
            estimated_delivery_date=estimated_delivery_date,
        )
        self.touch()

    def touch(self) -> None:
        self.updated_at = timezone.now()

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"
