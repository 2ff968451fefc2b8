"""Unit tests for Order, OrderItem and ShippingInfo.

Covers:
- ``Order.place``: totals, PENDING status, UUIDv7 identifier, timestamps.
- Mixed currency rejection.
- ``transition_to`` and ``update_tracking`` timestamp handling.
- ``__str__`` representation.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal

import pytest
from freezegun import freeze_time

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import (
    InvalidStatusTransition,
    MissingShippingAddress,
    MixedCurrency,
)
from modules.orders.models import Order, OrderItem, ShippingInfo

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _item(product_id="prod1", quantity=1, price="99.99", currency="USD"):
    return OrderItem(
        product_id=product_id,
        variant_id=f"{product_id}-v",
        quantity=quantity,
        price=Decimal(price),
        currency=currency,
    )


# ===========================================================================
# OrderItem
# ===========================================================================


class TestOrderItem:
    def test_line_total(self):
        assert _item(quantity=3, price="1.10").line_total == Decimal("3.30")

    def test_is_frozen(self):
        item = _item()
        with pytest.raises(AttributeError):
            item.price = Decimal("0")


# ===========================================================================
# Order.place
# ===========================================================================


class TestOrderPlace:
    def test_totals(self, address):
        order = Order.place("1", [_item(quantity=2)], address)

        assert order.subtotal == Decimal("199.98")
        assert order.tax == Decimal("19.998")
        assert order.total == Decimal("219.978")

    def test_decimal_totals_are_exact(self, address):
        order = Order.place(
            "1", [_item("a", 1, "0.10"), _item("b", 2, "0.20")], address
        )

        assert order.subtotal == Decimal("0.50")
        assert order.tax == Decimal("0.050")
        assert order.total == Decimal("0.550")

    def test_initial_state(self, address):
        order = Order.place("1", [_item()], address)

        assert order.status == OrderStatus.PENDING
        assert order.currency == "USD"
        assert order.customer_id == "1"
        assert order.shipping_info == ShippingInfo(shipping_address=address)
        assert not order.is_terminal

    def test_identifier_is_uuid7(self, address):
        order = Order.place("1", [_item()], address)
        assert uuid.UUID(order.id).version == 7

    @freeze_time("2026-02-03 04:05:06")
    def test_timestamps(self, address):
        order = Order.place("1", [_item()], address)

        assert order.created_at.isoformat() == "2026-02-03T04:05:06+00:00"
        assert order.updated_at == order.created_at

    def test_mixed_currency(self, address):
        with pytest.raises(MixedCurrency, match="same currency") as exc_info:
            Order.place("1", [_item(), _item("x", currency="EUR")], address)
        assert exc_info.value.currencies == {"USD", "EUR"}

    def test_items_are_stored_as_tuple(self, address):
        items = [_item(), _item("prod2")]
        order = Order.place("1", items, address)
        items.clear()

        assert len(order.items) == 2

    def test_str(self, address):
        order = Order.place("1", [_item()], address)
        assert str(order) == f"{order.id} (PENDING)"


# ===========================================================================
# Mutations
# ===========================================================================


class TestOrderMutations:
    def test_transition_refreshes_updated_at(self, address):
        with freeze_time("2026-01-01 00:00:00"):
            order = Order.place("1", [_item()], address)
        with freeze_time("2026-01-01 01:00:00"):
            old = order.transition_to(OrderStatus.PROCESSING)

        assert old == OrderStatus.PENDING
        assert order.status == OrderStatus.PROCESSING
        assert (order.updated_at - order.created_at).total_seconds() == 3600

    def test_invalid_transition_leaves_order_untouched(self, address):
        order = Order.place("1", [_item()], address)
        before = order.updated_at

        with pytest.raises(InvalidStatusTransition):
            order.transition_to(OrderStatus.SHIPPED)

        assert order.status == OrderStatus.PENDING
        assert order.updated_at == before

    def test_update_tracking_keeps_address(self, address):
        order = Order.place("1", [_item()], address)

        order.update_tracking("UPS", "1Z", date(2026, 1, 9))

        assert order.shipping_info == ShippingInfo(
            shipping_address=address,
            tracking_company="UPS",
            tracking_number="1Z",
            estimated_delivery_date=date(2026, 1, 9),
        )

    def test_update_tracking_without_address(self, address):
        order = Order.place("1", [_item()], address)
        order.shipping_info = None

        with pytest.raises(MissingShippingAddress):
            order.update_tracking("UPS", "1Z")

    def test_created_at_never_changes(self, address):
        order = Order.place("1", [_item()], address)
        created = order.created_at

        order.transition_to(OrderStatus.CANCELED)
        order.update_tracking("UPS", "1Z")

        assert order.created_at == created
