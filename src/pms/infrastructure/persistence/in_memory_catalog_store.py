"""Dict-backed implementation of CatalogStore.

Keeps everything in process memory with its own id counter. Used when
no database is configured, as the degraded-mode fallback, and in tests.
"""

from __future__ import annotations

from collections.abc import Iterable

from pms.domain.exceptions import EntityNotFoundError
from pms.domain.model.stock_item import StockItem
from pms.domain.repository.catalog_store import CatalogStore


class InMemoryCatalogStore(CatalogStore):

    def __init__(self, items: Iterable[StockItem] | None = None) -> None:
        self._store: dict[int, StockItem] = {}
        self._next_id = 1
        for item in items or []:
            self.put(item)

    # --- CatalogStore interface -----------------------------------------------

    def put(self, item: StockItem) -> StockItem:
        stored = item.copy()
        if stored.id == 0:
            stored.id = self._next_id
        # Explicit ids overwrite; the counter always moves past them
        self._next_id = max(self._next_id, stored.id + 1)
        self._store[stored.id] = stored
        return stored.copy()

    def get(self, item_id: int) -> StockItem | None:
        item = self._store.get(item_id)
        return item.copy() if item is not None else None

    def list_all(self) -> list[StockItem]:
        return [self._store[key].copy() for key in sorted(self._store)]

    def update(self, item: StockItem) -> None:
        if item.id not in self._store:
            raise EntityNotFoundError(f"Item #{item.id} not found")
        self._store[item.id] = item.copy()

    def delete(self, item_id: int) -> None:
        if item_id not in self._store:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        del self._store[item_id]
