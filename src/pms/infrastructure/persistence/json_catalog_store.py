"""JSON-file-backed implementation of CatalogStore."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pms.domain.exceptions import EntityNotFoundError, StoreError
from pms.domain.model.stock_item import StockItem
from pms.domain.repository.catalog_store import CatalogStore


class JsonCatalogStore(CatalogStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CatalogStore interface -----------------------------------------------

    def put(self, item: StockItem) -> StockItem:
        items = self._load("put")
        stored = item.copy()
        if stored.id == 0:
            stored.id = max(items, default=0) + 1
        # Upsert: an explicit id replaces whatever was there
        items[stored.id] = stored
        self._persist(items, "put")
        return stored.copy()

    def get(self, item_id: int) -> StockItem | None:
        return self._load("get").get(item_id)

    def list_all(self) -> list[StockItem]:
        items = self._load("list")
        return [items[key] for key in sorted(items)]

    def update(self, item: StockItem) -> None:
        items = self._load("update")
        if item.id not in items:
            raise EntityNotFoundError(f"Item #{item.id} not found")
        items[item.id] = item.copy()
        self._persist(items, "update")

    def delete(self, item_id: int) -> None:
        items = self._load("delete")
        if item_id not in items:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        del items[item_id]
        self._persist(items, "delete")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: StockItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "description": item.description,
            "price": str(item.price),
            "category": item.category,
            "stock_quantity": item.stock_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockItem:
        return StockItem(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Decimal(raw["price"]),
            category=raw["category"],
            stock_quantity=raw.get("stock_quantity", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self, operation: str) -> dict[int, StockItem]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except (OSError, ValueError, KeyError, InvalidOperation) as exc:
            raise StoreError(operation, f"cannot read {self._file_path}: {exc}") from exc

    def _persist(self, items: dict[int, StockItem], operation: str) -> None:
        raw = [self._to_raw(items[key]) for key in sorted(items)]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreError(operation, f"cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreError("connect", f"cannot create {self._file_path}: {exc}") from exc
