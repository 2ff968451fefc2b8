"""Inventory DTOs.

- ``ProductDetails``: catalog entry returned by inventory providers.

Prices are ``Decimal`` so order totals stay exact.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class ProductDetails(BaseModel):
    """Immutable product snapshot."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: Decimal
    currency: str
    stock_level: int

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("stock_level")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock level cannot be negative.")
        return v
