"""Shared table rendering for CLI output."""

from __future__ import annotations

from collections.abc import Sequence

import click

from pms.domain.model.stock_item import StockItem


def echo_items(items: Sequence[StockItem], empty: str = "No items found.") -> None:
    if not items:
        click.echo(empty)
        return

    click.echo(f"{'ID':<5} {'Name':<28} {'Category':<14} {'Price':>16} {'Qty':>7}")
    click.echo("-" * 74)
    for item in items:
        click.echo(
            f"{item.id:<5} {item.name[:28]:<28} {item.category[:14]:<14} "
            f"{item.display_price:>16} {item.stock_quantity:>7}"
        )


def echo_item_details(item: StockItem) -> None:
    click.echo(f"ID:          {item.id}")
    click.echo(f"Name:        {item.name}")
    click.echo(f"Description: {item.description}")
    click.echo(f"Price:       {item.display_price}")
    click.echo(f"Category:    {item.category}")
    click.echo(f"In stock:    {item.stock_quantity}")
