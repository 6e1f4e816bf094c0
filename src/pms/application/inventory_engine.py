"""Application service: the inventory mutation engine.

Enforces the business rules for reading and mutating the catalog and
delegates raw storage to a CatalogStore. Every call is a single
decision over the current store contents; the engine keeps no state of
its own and assumes a single writer (no locking, no retries).

Error policy:
- field violations raise ValidationError before any store call;
- a missing id on update/delete/quantity changes is reported as False;
- StoreError on a mutation is logged and reported as False (or as an
  ERROR status by the compound operations); reads and ``add`` let it
  propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pms.application.add_item import AddItemHandler
from pms.application.delete_by_quantity import DeleteByQuantityHandler
from pms.application.dto import AddItemResult, DeleteItemResult
from pms.domain.exceptions import EntityNotFoundError, StoreError, ValidationError
from pms.domain.model.stock_item import StockItem
from pms.domain.repository.catalog_store import CatalogStore
from pms.domain.service import catalog_queries
from pms.domain.service.stock_item_validator import validate_stock_item
from pms.logging_config import get_logger

logger = get_logger("application.inventory_engine")


class InventoryEngine:

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    @property
    def store(self) -> CatalogStore:
        return self._store

    # --- CRUD -----------------------------------------------------------------

    def add(self, item: StockItem) -> StockItem:
        """Store a new item; ``id == 0`` lets the store assign one."""
        validate_stock_item(item)
        stored = self._store.put(item)
        logger.info(
            "item_added",
            extra={"item_id": stored.id, "quantity": stored.stock_quantity},
        )
        return stored

    def get_by_id(self, item_id: int) -> StockItem | None:
        return self._store.get(item_id)

    def get_all(self) -> list[StockItem]:
        return self._store.list_all()

    def update(self, item: StockItem) -> bool:
        """Replace all fields of the record with ``item.id``.

        Returns False when the id is absent or the store fails.
        """
        validate_stock_item(item)
        try:
            self._store.update(item)
        except EntityNotFoundError:
            return False
        except StoreError:
            logger.exception("item_update_failed", extra={"item_id": item.id})
            return False
        logger.info(
            "item_updated",
            extra={"item_id": item.id, "quantity": item.stock_quantity},
        )
        return True

    def delete(self, item_id: int) -> bool:
        try:
            self._store.delete(item_id)
        except EntityNotFoundError:
            return False
        except StoreError:
            logger.exception("item_delete_failed", extra={"item_id": item_id})
            return False
        logger.info("item_deleted", extra={"item_id": item_id})
        return True

    # --- Queries --------------------------------------------------------------

    def filter_by_category(self, category: str) -> list[StockItem]:
        return catalog_queries.filter_by_category(self.get_all(), category)

    def search(self, query: str) -> list[StockItem]:
        return catalog_queries.search(self.get_all(), query)

    def group_by_category(self) -> dict[str, list[StockItem]]:
        return catalog_queries.group_by_category(self.get_all())

    def calculate_total_inventory_value(self) -> Decimal:
        return catalog_queries.total_inventory_value(self.get_all())

    def find_by_name_and_category(self, name: str, category: str) -> StockItem | None:
        return catalog_queries.find_by_name_and_category(self.get_all(), name, category)

    # --- Quantity changes -----------------------------------------------------

    def add_quantity(self, item_id: int, delta: int) -> bool:
        """Add ``delta`` units to an item's stock.

        ``delta`` itself is not bounded here, but the resulting record
        goes through ``update`` and so cannot end up below zero.
        """
        item = self.get_by_id(item_id)
        if item is None:
            return False
        item.stock_quantity += delta
        return self.update(item)

    def remove_quantity(self, item_id: int, amount: int) -> bool:
        """Take ``amount`` units out of stock.

        Removing the whole stock (or more) deletes the item.
        """
        if amount < 0:
            raise ValidationError("Quantity to remove cannot be negative")

        item = self.get_by_id(item_id)
        if item is None:
            return False

        if amount >= item.stock_quantity:
            return self.delete(item_id)

        item.stock_quantity -= amount
        return self.update(item)

    # --- Compound operations --------------------------------------------------

    def add_with_validation(self, item: StockItem, allow_merge: bool) -> AddItemResult:
        return AddItemHandler(self).handle(item, allow_merge=allow_merge)

    def delete_by_quantity(self, item_id: int, quantity: int) -> DeleteItemResult:
        return DeleteByQuantityHandler(self).handle(item_id, quantity)

    # --- Start-up -------------------------------------------------------------

    def seed_if_empty(self, items: Iterable[StockItem]) -> int:
        """Add ``items`` when the store holds nothing yet.

        Returns how many items were added.
        """
        if self.get_all():
            return 0

        added = 0
        for item in items:
            self.add(item.copy(id=0))
            added += 1
        logger.info("catalog_seeded", extra={"count": added})
        return added
