"""Application service: Delete by Quantity use case.

A quantity of zero, or one covering the whole stock, deletes the item
outright; a smaller positive quantity only reduces the stock. Negative
quantities are refused without touching the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pms.application.dto import DeleteItemResult, DeleteItemStatus
from pms.domain.exceptions import StoreError
from pms.logging_config import get_logger

if TYPE_CHECKING:
    from pms.application.inventory_engine import InventoryEngine

logger = get_logger("application.delete_by_quantity")


class DeleteByQuantityHandler:

    def __init__(self, engine: InventoryEngine) -> None:
        self._engine = engine

    def handle(self, item_id: int, quantity: int) -> DeleteItemResult:
        try:
            return self._apply(item_id, quantity)
        except StoreError as exc:
            logger.error(
                "delete_by_quantity_failed",
                extra={"item_id": item_id, "error": str(exc)},
            )
            return DeleteItemResult(
                status=DeleteItemStatus.ERROR,
                message=f"Failed to delete item: {exc}",
            )

    def _apply(self, item_id: int, quantity: int) -> DeleteItemResult:
        item = self._engine.get_by_id(item_id)
        if item is None:
            return DeleteItemResult(
                status=DeleteItemStatus.ERROR,
                message=f"Item #{item_id} not found",
            )

        if quantity == 0 or quantity >= item.stock_quantity:
            if not self._engine.delete(item_id):
                return DeleteItemResult(
                    status=DeleteItemStatus.ERROR,
                    item=item,
                    remaining_quantity=item.stock_quantity,
                    message=f"Item #{item_id} could not be deleted",
                )
            return DeleteItemResult(
                status=DeleteItemStatus.DELETED_COMPLETELY,
                item=item,
                remaining_quantity=0,
                message="Item deleted completely",
            )

        if quantity < 0:
            return DeleteItemResult(
                status=DeleteItemStatus.ERROR,
                item=item,
                remaining_quantity=item.stock_quantity,
                message="Quantity cannot be negative",
            )

        item.stock_quantity -= quantity
        if not self._engine.update(item):
            return DeleteItemResult(
                status=DeleteItemStatus.ERROR,
                item=item,
                remaining_quantity=item.stock_quantity + quantity,
                message=f"Item #{item_id} could not be updated",
            )

        return DeleteItemResult(
            status=DeleteItemStatus.QUANTITY_REDUCED,
            item=item,
            remaining_quantity=item.stock_quantity,
            message=f"Quantity reduced. Remaining: {item.stock_quantity}",
        )
