"""Customer DTOs.

``CustomerDetails`` is the contract returned by every customer provider.
It is immutable (``frozen=True``); the order service only reads it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from shared.domain.value_objects import Address


class CustomerDetails(BaseModel):
    """A customer as known by the customer directory."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str
    default_shipping_address: Optional[Address] = None
