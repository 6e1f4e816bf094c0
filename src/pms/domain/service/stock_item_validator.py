"""Field validation for StockItem.

Runs before any store call. Every failure raises ValidationError with a
message fit to show the user as-is.
"""

from __future__ import annotations

import re
from decimal import Decimal

from pms.domain.exceptions import ValidationError
from pms.domain.model.stock_item import StockItem

# ---------------------------------------------------------------------------
# Constants for field rules
# ---------------------------------------------------------------------------
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 200
MIN_PRICE = Decimal("0")
MAX_PRICE = Decimal("99999999.99")
PRICE_STEP = Decimal("0.01")
MIN_QUANTITY = 0
MAX_QUANTITY = 1_000_000

_FORBIDDEN_NAME_CHARS = re.compile(r"[<>{}\[\]\\|`~]")
_CYRILLIC = re.compile(r"[А-Яа-яЁё]")
_LATIN = re.compile(r"[A-Za-z]")


def validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Item name is required")
    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        raise ValidationError(
            f"Item name must be {MIN_NAME_LENGTH} to {MAX_NAME_LENGTH} characters long"
        )
    if _FORBIDDEN_NAME_CHARS.search(name):
        raise ValidationError("Item name contains forbidden special characters")


def validate_script(field: str, text: str) -> None:
    """Reject text that mixes Latin and Cyrillic letters."""
    if not text or not text.strip():
        return
    if _CYRILLIC.search(text) and _LATIN.search(text):
        raise ValidationError(f"{field} must not mix Latin and Cyrillic letters")


def validate_category(category: str) -> None:
    if not category or not category.strip():
        raise ValidationError("Item category is required")


def validate_price(price: Decimal) -> None:
    if not isinstance(price, Decimal):
        raise ValidationError(
            f"Item price must be a Decimal, got {type(price).__name__}"
        )
    if not price.is_finite():
        raise ValidationError(f"Item price must be a number, got {price}")
    if price < MIN_PRICE:
        raise ValidationError(f"Item price cannot be negative, got {price}")
    if price > MAX_PRICE:
        raise ValidationError(f"Item price must not exceed {MAX_PRICE}")
    # Stored as NUMERIC(12, 2)
    if price != price.quantize(PRICE_STEP):
        raise ValidationError(
            f"Item price must be a whole number of cents, got {price}"
        )


def validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < MIN_QUANTITY:
        raise ValidationError(f"Stock quantity cannot be below {MIN_QUANTITY}")
    if quantity > MAX_QUANTITY:
        raise ValidationError(f"Stock quantity must not exceed {MAX_QUANTITY}")


def validate_stock_item(item: StockItem) -> None:
    """Check every field of ``item``; the first violation wins."""
    validate_name(item.name)
    validate_script("Name", item.name)
    validate_script("Description", item.description)
    validate_category(item.category)
    validate_script("Category", item.category)
    validate_price(item.price)
    validate_quantity(item.stock_quantity)
