"""Application service: Add Item with duplicate resolution.

Decides whether an incoming item is stored as new, merged into an
existing record, or reported back as a conflict:

1. An explicit id that is already taken -> DUPLICATE_ID, nothing changes.
2. A record with the same name and category (case-insensitive) exists:
   - category "Other" -> stored as a separate item (SUCCESS);
   - merging allowed  -> quantity folded into the existing record (MERGED);
   - otherwise        -> DUPLICATE_PRODUCT, nothing changes.
3. No match -> stored as new (SUCCESS).

A merge that would push the stock past the quantity limit and store
failures both come back as an ERROR result carrying the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pms.application.dto import AddItemResult, AddItemStatus
from pms.domain.exceptions import StoreError
from pms.domain.model.stock_item import StockItem
from pms.domain.service.catalog_queries import is_sentinel_category
from pms.domain.service.stock_item_validator import MAX_QUANTITY, validate_stock_item
from pms.logging_config import get_logger

if TYPE_CHECKING:
    from pms.application.inventory_engine import InventoryEngine

logger = get_logger("application.add_item")


class AddItemHandler:

    def __init__(self, engine: InventoryEngine) -> None:
        self._engine = engine

    def handle(self, item: StockItem, allow_merge: bool) -> AddItemResult:
        validate_stock_item(item)

        try:
            result = self._resolve(item, allow_merge)
        except StoreError as exc:
            logger.error(
                "add_item_failed",
                extra={"item_id": item.id, "error": str(exc)},
            )
            return AddItemResult(
                status=AddItemStatus.ERROR,
                message=f"Failed to add item: {exc}",
            )

        logger.info(
            "add_item_resolved",
            extra={"item_name": item.name, "status": result.status.value},
        )
        return result

    def _resolve(self, item: StockItem, allow_merge: bool) -> AddItemResult:
        if item.id != 0:
            existing_by_id = self._engine.get_by_id(item.id)
            if existing_by_id is not None:
                return AddItemResult(
                    status=AddItemStatus.DUPLICATE_ID,
                    existing_item=existing_by_id,
                    message=f"Item with ID {item.id} already exists",
                )

        existing = self._engine.find_by_name_and_category(item.name, item.category)
        if existing is None or is_sentinel_category(item.category):
            stored = self._engine.add(item)
            return AddItemResult(
                status=AddItemStatus.SUCCESS,
                item=stored,
                message=f"Item added with ID {stored.id}",
            )

        if not allow_merge:
            return AddItemResult(
                status=AddItemStatus.DUPLICATE_PRODUCT,
                existing_item=existing,
                message=(
                    f"Item '{item.name}' in category '{item.category}' already exists"
                ),
            )

        merged_quantity = existing.stock_quantity + item.stock_quantity
        if merged_quantity > MAX_QUANTITY:
            return AddItemResult(
                status=AddItemStatus.ERROR,
                existing_item=existing,
                message=(
                    f"Cannot merge: quantity {merged_quantity} would exceed "
                    f"the limit of {MAX_QUANTITY}"
                ),
            )

        if not self._engine.add_quantity(existing.id, item.stock_quantity):
            return AddItemResult(
                status=AddItemStatus.ERROR,
                existing_item=existing,
                message=f"Failed to merge into item #{existing.id}",
            )

        merged = existing.copy(stock_quantity=merged_quantity)
        return AddItemResult(
            status=AddItemStatus.MERGED,
            existing_item=merged,
            message=f"Quantity increased. New quantity: {merged.stock_quantity}",
        )
