"""Order repository interface (the Order Store).

Extends ``IRepository[Order]`` with a per-order lock so the service can
serialize mutations on a single order without blocking the others.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def exists(self, id: str) -> bool:
        """Whether an order with this identifier is stored."""

    @abstractmethod
    def lock(self, id: str) -> AbstractContextManager[None]:
        """Exclusive lock scoped to one order identifier.

        Held around read-modify-write sequences on that order.
        """
