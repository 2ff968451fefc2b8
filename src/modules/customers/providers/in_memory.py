"""In-memory customer directory.

Stands in for the real customer service in development and tests.  Seeded
with the reference customer ``"1"``; extra customers can be passed in.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

import structlog

from modules.customers.dtos import CustomerDetails
from modules.customers.exceptions import CustomerNotFound
from shared.domain.value_objects import Address

logger = structlog.get_logger(__name__)

DEFAULT_CUSTOMERS = (
    CustomerDetails(
        id="1",
        email="john.doe@example.com",
        name="John Doe",
        default_shipping_address=Address(
            street="123 Main St",
            city="San Francisco",
            state="CA",
            country="USA",
            postal_code="94105",
        ),
    ),
)


class InMemoryCustomerProvider:
    """Customer directory backed by a dict it owns."""

    def __init__(self, customers: Optional[Iterable[CustomerDetails]] = None) -> None:
        seed = DEFAULT_CUSTOMERS if customers is None else customers
        self._customers: Dict[str, CustomerDetails] = {c.id: c for c in seed}

    def add_customer(self, customer: CustomerDetails) -> None:
        self._customers[customer.id] = customer

    def get_customer_by_id(self, customer_id: str) -> CustomerDetails:
        customer = self._customers.get(customer_id)
        if customer is None:
            logger.warning("customer.not_found", customer_id=customer_id)
            raise CustomerNotFound(f"Customer not found: {customer_id}")
        logger.debug("customer.retrieved", customer_id=customer_id)
        return customer

    def ping(self) -> bool:
        return True
