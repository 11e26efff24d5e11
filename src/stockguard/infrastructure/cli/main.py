import click

from stockguard.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from stockguard.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_pay,
    order_place,
    order_ship,
    order_show,
)
from stockguard.infrastructure.cli.variant_commands import (
    variant_add,
    variant_list,
    variant_update_price,
)
from stockguard.infrastructure.config import Settings
from stockguard.infrastructure.log import configure_logging


@click.group()
@click.option("--database-url", default=None, help="SQLAlchemy URL (overrides STOCKGUARD_DATABASE_URL).")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides STOCKGUARD_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, database_url: str | None, log_level: str | None) -> None:
    """stockguard: orders and stock for the clothing store"""
    settings = Settings.from_env().override(database_url=database_url, log_level=log_level)
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Place orders and move them through their lifecycle."""


@cli.group()
def variant() -> None:
    """Manage catalog variants (SKUs)."""


@cli.group()
def inventory() -> None:
    """Inspect and adjust stock."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_pay)
order.add_command(order_ship)
order.add_command(order_complete)
order.add_command(order_cancel)
variant.add_command(variant_add)
variant.add_command(variant_list)
variant.add_command(variant_update_price)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
