"""Customer provider package."""

from modules.customers.providers.in_memory import InMemoryCustomerProvider
from modules.customers.providers.interfaces import ICustomerProvider

__all__ = ["ICustomerProvider", "InMemoryCustomerProvider"]
