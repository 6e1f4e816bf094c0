"""Abstract store for StockItem records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON, SQLAlchemy
ORM, SQLAlchemy Core) live in the infrastructure layer and are
interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pms.domain.model.stock_item import StockItem


class CatalogStore(ABC):

    @abstractmethod
    def put(self, item: StockItem) -> StockItem:
        """Store a new item and return a copy carrying its id.

        An item with ``id == 0`` gets the next sequential id. What happens
        to an explicit id that is already taken is up to the store.
        """

    @abstractmethod
    def get(self, item_id: int) -> StockItem | None:
        """Return a copy of the item with this id, or None."""

    @abstractmethod
    def list_all(self) -> list[StockItem]:
        """Return a snapshot of every item, ordered by id."""

    @abstractmethod
    def update(self, item: StockItem) -> None:
        """Replace the stored fields of ``item.id``.

        Raises EntityNotFoundError if the id is absent.
        """

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an item. Raises EntityNotFoundError if the id is absent."""
