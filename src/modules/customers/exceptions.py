"""Customer domain exceptions."""

from __future__ import annotations

from shared.domain.exceptions import NotFound


class CustomerNotFound(NotFound):
    """The referenced customer does not exist in the customer directory."""
