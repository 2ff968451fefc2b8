"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Raised when an order is placed."""


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Raised on every status transition.  Payload: ``old_status``, ``new_status``."""


@dataclass(frozen=True)
class OrderCanceled(DomainEvent):
    """Raised when an order reaches CANCELED."""


@dataclass(frozen=True)
class ShippingInfoUpdated(DomainEvent):
    """Raised when tracking details are replaced."""


@dataclass(frozen=True)
class OrderDeleted(DomainEvent):
    """Raised when an order is removed from the store."""
