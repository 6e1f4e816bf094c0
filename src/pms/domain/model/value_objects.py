"""Money: how prices are parsed from user input and shown back.

Prices live on ``StockItem`` as plain ``Decimal``; ``Money`` wraps one
only at the edges, when reading a typed amount or printing a total.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pms.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "RUB"


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __str__(self) -> str:
        # "75 000.00 RUB"
        grouped = f"{self.amount:,.2f}".replace(",", " ")
        return f"{grouped} {self.currency}"

    @classmethod
    def of(cls, amount: str | int | Decimal) -> Money:
        """Parse a typed amount; accepts "2 500,50" as well as "2500.50"."""
        text = str(amount).strip().replace(" ", "").replace(",", ".")
        try:
            value = Decimal(text)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return cls(value)
