"""Errors raised by the catalog domain.

The CLI catches ``DomainException`` and prints the message; anything
else is a bug and is left to propagate.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field constraint or business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreError(DomainException):
    """The catalog store failed to carry out an operation.

    Carries the store operation and the item id involved (if any) so the
    caller can report what failed without holding on to the driver error.
    """

    def __init__(self, operation: str, message: str, item_id: int | None = None) -> None:
        self.operation = operation
        self.item_id = item_id
        where = f" (id={item_id})" if item_id is not None else ""
        super().__init__(f"Store {operation} failed{where}: {message}")
