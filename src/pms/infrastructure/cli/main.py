import click

from pms.infrastructure.cli.item_commands import (
    item_add,
    item_add_stock,
    item_delete,
    item_filter,
    item_groups,
    item_list,
    item_reduce,
    item_remove_stock,
    item_search,
    item_show,
    item_update,
    item_value,
)
from pms.infrastructure.cli.menu import menu
from pms.infrastructure.config import STORE_CHOICES, Settings


@click.group()
@click.option(
    "--store",
    type=click.Choice(STORE_CHOICES),
    envvar="PMS_STORE",
    default=None,
    help="Catalog store backend (default: json; memory keeps nothing between runs).",
)
@click.pass_context
def cli(ctx: click.Context, store: str | None) -> None:
    """PMS: product inventory catalog"""
    ctx.obj = Settings.from_env(store=store)


@cli.group()
def item() -> None:
    """Manage stock items."""


# Register subcommands
item.add_command(item_add)
item.add_command(item_add_stock)
item.add_command(item_delete)
item.add_command(item_filter)
item.add_command(item_groups)
item.add_command(item_list)
item.add_command(item_reduce)
item.add_command(item_remove_stock)
item.add_command(item_search)
item.add_command(item_show)
item.add_command(item_update)
item.add_command(item_value)
cli.add_command(menu)
