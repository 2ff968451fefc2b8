"""Inventory provider interface.

Product look-ups, availability checks and stock reservations.  The order
service holds a reference to something satisfying this protocol; it never
touches reservation counters directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from modules.inventory.dtos import ProductDetails


@runtime_checkable
class IInventoryProvider(Protocol):
    """Contract of the inventory/reservation service."""

    def get_product_by_id(self, product_id: str) -> ProductDetails:
        """Return product details.

        Raises:
            ProductNotFound: if the product is unknown.
        """
        ...

    def check_product_availability(self, product_id: str, quantity: int) -> bool:
        """``True`` iff ``stock_level - reserved >= quantity``.

        Raises:
            ProductNotFound: if the product is unknown.
        """
        ...

    def reserve_products(self, product_id: str, quantity: int) -> bool:
        """Re-check availability and hold ``quantity`` units.

        Returns ``False`` without side effects when stock is insufficient.
        """
        ...

    def release_products(self, product_id: str, quantity: int) -> None:
        """Give back ``quantity`` previously reserved units."""
        ...

    def get_reserved_quantity(self, product_id: str) -> int:
        """Units currently held for ``product_id``."""
        ...

    def ping(self) -> bool:
        """Return ``True`` when the inventory service is reachable."""
        ...
