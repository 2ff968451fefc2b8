"""Inventory provider package."""

from modules.inventory.providers.in_memory import InMemoryInventoryProvider
from modules.inventory.providers.interfaces import IInventoryProvider

__all__ = ["IInventoryProvider", "InMemoryInventoryProvider"]
