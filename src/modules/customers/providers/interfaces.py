"""Customer provider interface.

The customer directory is an external collaborator.  The order service
depends only on this structural contract, so a networked client, the
in-memory provider or a test double all satisfy it without inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerDetails


@runtime_checkable
class ICustomerProvider(Protocol):
    """Read-only access to the customer directory."""

    def get_customer_by_id(self, customer_id: str) -> CustomerDetails:
        """Return the customer.

        Raises:
            CustomerNotFound: if no customer has this identifier.
        """
        ...

    def ping(self) -> bool:
        """Return ``True`` when the directory is reachable."""
        ...
