"""Inventory domain exceptions."""

from __future__ import annotations

from shared.domain.exceptions import NotFound


class ProductNotFound(NotFound):
    """The referenced product is unknown to the inventory service."""
