"""Domain service: read-only queries over a catalog snapshot.

Pure functions over a sequence of StockItem. The engine loads a snapshot
from the store and hands it in, so these never touch persistence and are
trivially testable.

Name and category comparisons are case-insensitive (``str.casefold``).
Where several items match, the one with the lowest id wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pms.domain.model.stock_item import SENTINEL_CATEGORY, StockItem


def _same(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def is_sentinel_category(category: str) -> bool:
    """True for the catch-all category that never merges duplicates."""
    return _same(category, SENTINEL_CATEGORY)


def filter_by_category(items: Iterable[StockItem], category: str) -> list[StockItem]:
    return [item for item in items if _same(item.category, category)]


def group_by_category(items: Iterable[StockItem]) -> dict[str, list[StockItem]]:
    """Partition items by category.

    Categories differing only in case share a group; the group key is
    the casing of the first item seen.
    """
    groups: dict[str, list[StockItem]] = {}
    keys: dict[str, str] = {}
    for item in items:
        folded = item.category.casefold()
        key = keys.setdefault(folded, item.category)
        groups.setdefault(key, []).append(item)
    return groups


def total_inventory_value(items: Iterable[StockItem]) -> Decimal:
    """Sum of ``price * stock_quantity`` over all items (0 when empty)."""
    return sum((item.line_value for item in items), Decimal("0"))


def find_by_name_and_category(
    items: Iterable[StockItem], name: str, category: str
) -> StockItem | None:
    matches = [
        item
        for item in items
        if _same(item.name, name) and _same(item.category, category)
    ]
    if not matches:
        return None
    return min(matches, key=lambda item: item.id)


def search(items: Iterable[StockItem], query: str) -> list[StockItem]:
    """Case-insensitive substring search over name, description and category.

    A blank query matches everything.
    """
    if not query or not query.strip():
        return list(items)

    needle = query.casefold()
    return [
        item
        for item in items
        if needle in item.name.casefold()
        or needle in item.description.casefold()
        or needle in item.category.casefold()
    ]


def exists_by_id(items: Iterable[StockItem], item_id: int) -> bool:
    return any(item.id == item_id for item in items)
