"""Value objects shared between customers and orders."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    """Postal address.  Plain value object without identity."""

    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    state: str
    country: str
    postal_code: str
