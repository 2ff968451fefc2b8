"""Error taxonomy shared by every bounded context.

Two kinds of failure reach callers:

- ``NotFound``: a referenced entity (customer, product, order) does not exist.
- ``InvalidRequest``: the input breaks a business rule.

Module-specific exceptions subclass one of these so the API layer can map
them to HTTP status codes without knowing every concrete type.
"""

from __future__ import annotations


class NotFound(Exception):
    """A referenced entity does not exist."""


class InvalidRequest(Exception):
    """The request violates a business rule."""
