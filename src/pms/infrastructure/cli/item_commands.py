"""CLI commands for stock items."""

from __future__ import annotations

from decimal import Decimal

import click

from pms.application.dto import AddItemStatus, CategorySummaryDTO, DeleteItemStatus
from pms.domain.exceptions import DomainException
from pms.domain.model.stock_item import StockItem
from pms.domain.model.value_objects import Money
from pms.infrastructure.bootstrap import inventory_engine
from pms.infrastructure.cli.formatting import echo_item_details, echo_items
from pms.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def item_list(settings: Settings) -> None:
    """List all items in the catalog."""
    engine = inventory_engine(settings)

    try:
        items = engine.get_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_items(items)


@click.command("show")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.pass_obj
def item_show(settings: Settings, item_id: int) -> None:
    """Show details of one item."""
    engine = inventory_engine(settings)

    try:
        item = engine.get_by_id(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if item is None:
        raise click.ClickException(f"Item #{item_id} not found")
    echo_item_details(item)


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Unit price (e.g. 2500.00).")
@click.option("--category", required=True, help="Category; 'Other' never merges.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--quantity", default=0, type=int, help="Units in stock.")
@click.option("--id", "item_id", default=0, type=int, help="Explicit ID (0 = assign).")
@click.option(
    "--merge/--no-merge",
    default=False,
    help="Fold the quantity into an existing item with the same name and category.",
)
@click.pass_obj
def item_add(
    settings: Settings,
    name: str,
    price: str,
    category: str,
    description: str,
    quantity: int,
    item_id: int,
    merge: bool,
) -> None:
    """Add an item, resolving duplicates by name and category."""
    engine = inventory_engine(settings)

    try:
        item = StockItem(
            id=item_id,
            name=name.strip(),
            description=description.strip(),
            price=Money.of(price).amount,
            category=category.strip(),
            stock_quantity=quantity,
        )
        result = engine.add_with_validation(item, allow_merge=merge)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.status == AddItemStatus.DUPLICATE_PRODUCT:
        raise click.ClickException(f"{result.message} (use --merge to add to its stock)")
    if result.status in (AddItemStatus.DUPLICATE_ID, AddItemStatus.ERROR):
        raise click.ClickException(result.message)

    click.echo(result.message)


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--category", default=None, help="New category.")
@click.option("--quantity", default=None, type=int, help="New stock quantity.")
@click.pass_obj
def item_update(
    settings: Settings,
    item_id: int,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    quantity: int | None,
) -> None:
    """Update fields of an item; omitted fields keep their value."""
    engine = inventory_engine(settings)

    try:
        item = engine.get_by_id(item_id)
        if item is None:
            raise click.ClickException(f"Item #{item_id} not found")

        if name is not None:
            item.name = name.strip()
        if description is not None:
            item.description = description.strip()
        if price is not None:
            item.price = Money.of(price).amount
        if category is not None:
            item.category = category.strip()
        if quantity is not None:
            item.stock_quantity = quantity

        updated = engine.update(item)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"Item #{item_id} could not be updated")
    click.echo(f"Item #{item_id} updated.")


@click.command("delete")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def item_delete(settings: Settings, item_id: int, yes: bool) -> None:
    """Delete an item with all its stock."""
    engine = inventory_engine(settings)

    try:
        item = engine.get_by_id(item_id)
        if item is None:
            raise click.ClickException(f"Item #{item_id} not found")
        if not yes:
            click.confirm(f"Delete item '{item.name}'?", abort=True)
        deleted = engine.delete(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Item #{item_id} could not be deleted")
    click.echo(f"Item #{item_id} deleted.")


@click.command("add-stock")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def item_add_stock(settings: Settings, item_id: int, quantity: int) -> None:
    """Add units to an item's stock."""
    engine = inventory_engine(settings)

    try:
        ok = engine.add_quantity(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not ok:
        raise click.ClickException(f"Item #{item_id} not found")
    click.echo(f"Added {quantity} to item #{item_id}.")


@click.command("remove-stock")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
@click.pass_obj
def item_remove_stock(settings: Settings, item_id: int, quantity: int) -> None:
    """Remove units from stock; removing everything deletes the item."""
    engine = inventory_engine(settings)

    try:
        ok = engine.remove_quantity(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not ok:
        raise click.ClickException(f"Item #{item_id} not found")
    click.echo(f"Removed {quantity} from item #{item_id}.")


@click.command("reduce")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option(
    "--quantity", required=True, type=int, help="Units to delete (0 = the whole item)."
)
@click.pass_obj
def item_reduce(settings: Settings, item_id: int, quantity: int) -> None:
    """Delete a quantity of an item, or the whole item."""
    engine = inventory_engine(settings)
    result = engine.delete_by_quantity(item_id, quantity)

    if result.status == DeleteItemStatus.ERROR:
        raise click.ClickException(result.message)
    click.echo(result.message)


@click.command("filter")
@click.option("--category", required=True, help="Category to match (any case).")
@click.pass_obj
def item_filter(settings: Settings, category: str) -> None:
    """List items in one category."""
    engine = inventory_engine(settings)

    try:
        items = engine.filter_by_category(category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Items in category '{category}':")
    echo_items(items)


@click.command("search")
@click.argument("query", required=False, default="")
@click.pass_obj
def item_search(settings: Settings, query: str) -> None:
    """Search names, descriptions and categories."""
    engine = inventory_engine(settings)

    try:
        items = engine.search(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_items(items)


def _summaries(groups) -> list[CategorySummaryDTO]:
    return [
        CategorySummaryDTO(
            category=category,
            item_count=len(items),
            total_quantity=sum(item.stock_quantity for item in items),
            total_value=sum((item.line_value for item in items), Decimal("0")),
        )
        for category, items in groups.items()
    ]


@click.command("groups")
@click.pass_obj
def item_groups(settings: Settings) -> None:
    """Summarise the catalog per category."""
    engine = inventory_engine(settings)

    try:
        summaries = _summaries(engine.group_by_category())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not summaries:
        click.echo("No items found.")
        return

    click.echo(f"{'Category':<20} {'Items':>6} {'Units':>8} {'Value':>20}")
    click.echo("-" * 57)
    for s in summaries:
        click.echo(
            f"{s.category[:20]:<20} {s.item_count:>6} {s.total_quantity:>8} "
            f"{str(Money(s.total_value)):>20}"
        )


@click.command("value")
@click.pass_obj
def item_value(settings: Settings) -> None:
    """Show the total value of the stock on hand."""
    engine = inventory_engine(settings)

    try:
        total = engine.calculate_total_inventory_value()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total inventory value: {Money(total)}")
