"""Interactive console menu over the inventory engine.

One engine serves the whole session, so the in-memory store keeps its
changes until the user exits.
"""

from __future__ import annotations

import click

from pms.application.dto import AddItemStatus
from pms.application.inventory_engine import InventoryEngine
from pms.domain.exceptions import DomainException, ValidationError
from pms.domain.model.stock_item import StockItem
from pms.domain.model.value_objects import Money
from pms.infrastructure.bootstrap import inventory_engine
from pms.infrastructure.cli.formatting import echo_item_details, echo_items
from pms.infrastructure.config import Settings

_MENU = """
 1. List all items
 2. Show item details
 3. Add an item
 4. Update an item
 5. Delete an item
 6. Filter by category
 7. Total inventory value
 8. Search
 9. Delete a quantity of an item
 0. Exit"""

_CLEAR = "-"


class MenuController:

    def __init__(self, engine: InventoryEngine) -> None:
        self._engine = engine
        self._actions = {
            "1": self.list_items,
            "2": self.show_details,
            "3": self.add_item,
            "4": self.update_item,
            "5": self.delete_item,
            "6": self.filter_by_category,
            "7": self.total_value,
            "8": self.search,
            "9": self.delete_by_quantity,
        }

    def run(self) -> None:
        click.echo("=== Inventory catalog ===")
        while True:
            click.echo(_MENU)
            choice = click.prompt("Choice", default="", show_default=False).strip()
            if choice == "0":
                click.echo("Bye.")
                return

            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid choice.")
                continue

            try:
                action()
            except ValidationError as exc:
                click.echo(f"Validation error: {exc}")
            except DomainException as exc:
                click.echo(f"Error: {exc}")

    # --- Actions --------------------------------------------------------------

    def list_items(self) -> None:
        echo_items(self._engine.get_all())

    def show_details(self) -> None:
        item = self._prompt_existing()
        if item is not None:
            echo_item_details(item)

    def add_item(self) -> None:
        item = StockItem(
            id=0,
            name=click.prompt("Name").strip(),
            description=_prompt_optional("Description"),
            price=Money.of(click.prompt("Price")).amount,
            category=click.prompt("Category").strip(),
            stock_quantity=click.prompt("Quantity", type=int),
        )

        result = self._engine.add_with_validation(item, allow_merge=False)
        if result.status == AddItemStatus.DUPLICATE_PRODUCT:
            click.echo(result.message)
            if not click.confirm("Add the quantity to the existing item?"):
                click.echo("Cancelled.")
                return
            result = self._engine.add_with_validation(item, allow_merge=True)

        click.echo(result.message)

    def update_item(self) -> None:
        item = self._prompt_existing()
        if item is None:
            return

        click.echo('Leave a field empty to keep its value; "-" clears the description.')
        name = _prompt_optional(f"Name [{item.name}]")
        description = _prompt_optional(f"Description [{item.description}]")
        price = _prompt_optional(f"Price [{item.price}]")
        category = _prompt_optional(f"Category [{item.category}]")
        quantity = _prompt_optional(f"Quantity [{item.stock_quantity}]")

        if name:
            item.name = name
        if description == _CLEAR:
            item.description = ""
        elif description:
            item.description = description
        if price:
            item.price = Money.of(price).amount
        if category:
            item.category = category
        if quantity:
            try:
                item.stock_quantity = int(quantity)
            except ValueError:
                click.echo("Invalid quantity. Update cancelled.")
                return

        if self._engine.update(item):
            click.echo("Item updated.")
        else:
            click.echo("Item could not be updated.")

    def delete_item(self) -> None:
        item = self._prompt_existing()
        if item is None:
            return
        if not click.confirm(f"Delete item '{item.name}'?"):
            click.echo("Cancelled.")
            return
        if self._engine.delete(item.id):
            click.echo("Item deleted.")
        else:
            click.echo("Item could not be deleted.")

    def filter_by_category(self) -> None:
        category = click.prompt("Category")
        click.echo(f"Items in category '{category}':")
        echo_items(self._engine.filter_by_category(category))

    def total_value(self) -> None:
        total = self._engine.calculate_total_inventory_value()
        click.echo(f"Total inventory value: {Money(total)}")

    def search(self) -> None:
        echo_items(self._engine.search(_prompt_optional("Search for")))

    def delete_by_quantity(self) -> None:
        item = self._prompt_existing()
        if item is None:
            return
        click.echo(f"Current quantity: {item.stock_quantity}")
        quantity = click.prompt("Quantity to delete (0 = the whole item)", type=int)
        click.echo(self._engine.delete_by_quantity(item.id, quantity).message)

    # --- Input helpers --------------------------------------------------------

    def _prompt_existing(self) -> StockItem | None:
        item_id = click.prompt("Item ID", type=int)
        item = self._engine.get_by_id(item_id)
        if item is None:
            click.echo("Item not found.")
        return item


def _prompt_optional(label: str) -> str:
    return click.prompt(label, default="", show_default=False).strip()


@click.command("menu")
@click.pass_obj
def menu(settings: Settings) -> None:
    """Run the interactive console menu."""
    MenuController(inventory_engine(settings)).run()
