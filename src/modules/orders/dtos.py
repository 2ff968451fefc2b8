"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: input for a single order line item.
- ``CreateOrderDTO``: input for order creation (nested items + address).
- ``UpdateOrderStatusDTO``: input for a status transition.
- ``UpdateShippingInfoDTO``: input for tracking details.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import OrderStatus
from shared.domain.value_objects import Address


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item in a creation request.

    ``price`` and ``currency`` are resolved by the Service Layer from the
    inventory provider, never taken from the caller.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    variant_id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``items`` must contain at least one item.
    - Each item quantity must be positive.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: str
    items: List[CreateOrderItemDTO]
    shipping_address: Address

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v


class UpdateOrderStatusDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: OrderStatus


class UpdateShippingInfoDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    tracking_company: str
    tracking_number: str
    estimated_delivery_date: Optional[date] = None
