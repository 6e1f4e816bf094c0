"""Data Transfer Objects: plain containers that cross layer boundaries.

Result objects let the engine report conflicts and partial outcomes as
values instead of exceptions; the caller decides what to do next.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pms.domain.model.stock_item import StockItem


class AddItemStatus(Enum):
    SUCCESS = "SUCCESS"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_PRODUCT = "DUPLICATE_PRODUCT"
    MERGED = "MERGED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class AddItemResult:
    """Output of ``add_with_validation``.

    ``existing_item`` is set for DUPLICATE_ID, DUPLICATE_PRODUCT and
    MERGED (after the merge); ``item`` is the newly stored record for
    SUCCESS.
    """

    status: AddItemStatus
    message: str
    existing_item: StockItem | None = None
    item: StockItem | None = None


class DeleteItemStatus(Enum):
    QUANTITY_REDUCED = "QUANTITY_REDUCED"
    DELETED_COMPLETELY = "DELETED_COMPLETELY"
    ERROR = "ERROR"


@dataclass(frozen=True)
class DeleteItemResult:
    """Output of ``delete_by_quantity``."""

    status: DeleteItemStatus
    message: str
    item: StockItem | None = None
    remaining_quantity: int = 0


@dataclass(frozen=True)
class CategorySummaryDTO:
    """Output: one category group as displayed to the user."""

    category: str
    item_count: int
    total_quantity: int
    total_value: Decimal
