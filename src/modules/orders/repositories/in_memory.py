"""In-memory implementation of the Order repository.

Owns a dict of orders keyed by identifier.  A registry lock guards the
dict itself; each order identifier additionally gets its own lock, handed
out by ``lock()``, so concurrent status and shipping updates on the same
order cannot lose each other's writes.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

import structlog

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class InMemoryOrderRepository(IOrderRepository):
    """Concrete Order repository backed by process memory."""

    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._order_locks: Dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        with self._registry_lock:
            return self._orders.get(id)

    def list(self) -> List[Order]:
        with self._registry_lock:
            return sorted(self._orders.values(), key=lambda o: o.id)

    def exists(self, id: str) -> bool:
        with self._registry_lock:
            return id in self._orders

    # ------------------------------------------------------------------
    # Save / Delete
    # ------------------------------------------------------------------

    def save(self, entity: Order) -> Order:
        with self._registry_lock:
            self._orders[entity.id] = entity
        logger.debug("order.saved", order_id=entity.id, status=str(entity.status))
        return entity

    def delete(self, id: str) -> bool:
        with self._registry_lock:
            removed = self._orders.pop(id, None)
            self._order_locks.pop(id, None)
        if removed is None:
            return False
        logger.debug("order.removed", order_id=id)
        return True

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    @contextmanager
    def lock(self, id: str) -> Iterator[None]:
        with self._registry_lock:
            order_lock = self._order_locks.setdefault(id, threading.RLock())
        try:
            with order_lock:
                yield
        finally:
            # Locks only live as long as their order.
            with self._registry_lock:
                if id not in self._orders:
                    self._order_locks.pop(id, None)
