from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.dtos import CustomerDetails
from modules.customers.providers.in_memory import InMemoryCustomerProvider
from modules.inventory.dtos import ProductDetails
from modules.inventory.providers.in_memory import InMemoryInventoryProvider
from modules.orders.repositories.in_memory import InMemoryOrderRepository
from modules.orders.services import OrderService
from modules.orders.wiring import reset_order_service
from shared.domain.value_objects import Address
from shared.infrastructure.bus import InMemoryEventBus


@pytest.fixture(autouse=True)
def _fresh_order_service():
    """Every test starts with an empty order store and fresh providers."""
    reset_order_service()
    yield
    reset_order_service()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def address():
    return Address(
        street="500 Market St",
        city="San Francisco",
        state="CA",
        country="USA",
        postal_code="94105",
    )


@pytest.fixture()
def customer_provider():
    """Directory with the default customer "1" plus customer "2"."""
    provider = InMemoryCustomerProvider()
    provider.add_customer(
        CustomerDetails(id="2", email="jane.roe@example.com", name="Jane Roe")
    )
    return provider


@pytest.fixture()
def inventory_provider():
    """Catalog with the default "prod1" plus a few extra products."""
    provider = InMemoryInventoryProvider()
    for product in (
        ProductDetails(
            id="prod2",
            name="Basic Widget",
            price=Decimal("10.00"),
            currency="USD",
            stock_level=5,
        ),
        ProductDetails(
            id="prod-eur",
            name="Euro Gadget",
            price=Decimal("20.00"),
            currency="EUR",
            stock_level=50,
        ),
        ProductDetails(
            id="prod-empty",
            name="Sold Out",
            price=Decimal("5.00"),
            currency="USD",
            stock_level=0,
        ),
    ):
        provider.add_product(product)
    return provider


@pytest.fixture()
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture()
def event_bus():
    return InMemoryEventBus()


@pytest.fixture()
def service(order_repository, customer_provider, inventory_provider, event_bus):
    return OrderService(
        order_repository=order_repository,
        customer_provider=customer_provider,
        inventory_provider=inventory_provider,
        event_bus=event_bus,
    )
