"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches the ``NotFound`` / ``InvalidRequest``
bases and translates them into HTTP responses.
"""

from __future__ import annotations

from modules.customers.exceptions import CustomerNotFound
from modules.inventory.exceptions import ProductNotFound
from shared.domain.exceptions import InvalidRequest, NotFound

__all__ = [
    "CustomerNotFound",
    "InvalidRequest",
    "InvalidStatusTransition",
    "MissingShippingAddress",
    "MixedCurrency",
    "NotFound",
    "OrderNotFound",
    "ProductNotFound",
    "ProductUnavailable",
]


class OrderNotFound(NotFound):
    """The requested order does not exist."""


class ProductUnavailable(InvalidRequest):
    """Not enough unreserved stock for the requested quantity."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(
            f"Product {product_id} is not available in requested quantity"
        )


class MixedCurrency(InvalidRequest):
    """Order items resolved to more than one currency."""

    def __init__(self, currencies: set[str]) -> None:
        self.currencies = currencies
        super().__init__("All items must be in the same currency")


class InvalidStatusTransition(InvalidRequest):
    """The state machine does not allow this status change."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Invalid status transition from {current} to {requested}")


class MissingShippingAddress(InvalidRequest):
    """Tracking details need an address to attach to."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(
            "Cannot update shipping info without a shipping address. "
            "Please set shipping address first."
        )
