"""In-memory inventory service.

Owns the product catalog and the per-product reservation counters.
``reserve_products`` re-checks and increments under a single lock, so two
concurrent reservations in this process can never over-commit stock.
"""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Dict, Iterable, Optional

import structlog

from modules.inventory.dtos import ProductDetails
from modules.inventory.exceptions import ProductNotFound

logger = structlog.get_logger(__name__)

DEFAULT_PRODUCTS = (
    ProductDetails(
        id="prod1",
        name="Premium Widget",
        price=Decimal("99.99"),
        currency="USD",
        stock_level=100,
    ),
)


class InMemoryInventoryProvider:
    """Inventory provider backed by dicts it owns."""

    def __init__(self, products: Optional[Iterable[ProductDetails]] = None) -> None:
        seed = DEFAULT_PRODUCTS if products is None else products
        self._products: Dict[str, ProductDetails] = {p.id: p for p in seed}
        self._reservations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def add_product(self, product: ProductDetails) -> None:
        with self._lock:
            self._products[product.id] = product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product_by_id(self, product_id: str) -> ProductDetails:
        product = self._products.get(product_id)
        if product is None:
            logger.warning("inventory.product_not_found", product_id=product_id)
            raise ProductNotFound(f"Product not found: {product_id}")
        return product

    def check_product_availability(self, product_id: str, quantity: int) -> bool:
        product = self.get_product_by_id(product_id)
        with self._lock:
            return self._available(product) >= quantity

    def get_reserved_quantity(self, product_id: str) -> int:
        with self._lock:
            return self._reservations.get(product_id, 0)

    def ping(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def reserve_products(self, product_id: str, quantity: int) -> bool:
        product = self.get_product_by_id(product_id)
        with self._lock:
            available = self._available(product)
            if available < quantity:
                logger.warning(
                    "inventory.reservation_refused",
                    product_id=product_id,
                    quantity=quantity,
                    available=available,
                )
                return False
            self._reservations[product_id] = (
                self._reservations.get(product_id, 0) + quantity
            )
            reserved = self._reservations[product_id]

        logger.info(
            "inventory.reserved",
            product_id=product_id,
            quantity=quantity,
            reserved=reserved,
        )
        return True

    def release_products(self, product_id: str, quantity: int) -> None:
        with self._lock:
            current = self._reservations.get(product_id, 0)
            self._reservations[product_id] = max(current - quantity, 0)
            reserved = self._reservations[product_id]
        logger.info(
            "inventory.released",
            product_id=product_id,
            quantity=quantity,
            reserved=reserved,
        )

    def _available(self, product: ProductDetails) -> int:
        return product.stock_level - self._reservations.get(product.id, 0)
