"""StockItem: the single record type of the catalog.

Stock items are owned by the catalog store. Anything handed out by a
store is a copy, so callers may mutate what they receive without
touching persisted state until they call ``update``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from pms.domain.model.value_objects import Money

# Category value that opts an item out of duplicate merging.
SENTINEL_CATEGORY = "Other"


@dataclass
class StockItem:
    """One inventory record.

    ``id == 0`` means "not yet stored"; the store assigns the next
    sequential id on ``put``.
    """

    id: int
    name: str
    category: str
    price: Decimal
    stock_quantity: int = 0
    description: str = ""

    @property
    def line_value(self) -> Decimal:
        """Value of the stock on hand (price times quantity)."""
        return self.price * self.stock_quantity

    @property
    def display_price(self) -> str:
        return str(Money(self.price))

    def copy(self, **changes) -> StockItem:
        return replace(self, **changes)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Price: {self.display_price}, "
            f"Category: {self.category}, Quantity: {self.stock_quantity}"
        )
