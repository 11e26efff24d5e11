"""CLI commands for inventory management."""

from __future__ import annotations

import click

from stockguard.application.set_stock import SetStockHandler
from stockguard.application.show_inventory import ShowInventoryHandler
from stockguard.domain.exceptions import DomainException
from stockguard.infrastructure.bootstrap import unit_of_work
from stockguard.infrastructure.config import Settings


@click.command("set")
@click.option("--sku", required=True, help="SKU code.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--reorder-point", default=None, type=int, help="Low-stock threshold.")
@click.pass_obj
def inventory_set(settings: Settings, sku: str, stock: int, reorder_point: int | None) -> None:
    """Set the stock level of a variant."""
    handler = SetStockHandler(unit_of_work(settings))

    try:
        handler.handle(sku=sku, stock=stock, reorder_point=reorder_point)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{sku}' set to {stock}")


@click.command("show")
@click.option("--low-stock", is_flag=True, default=False, help="Only variants at or below their reorder point.")
@click.pass_obj
def inventory_show(settings: Settings, low_stock: bool) -> None:
    """Show current stock levels."""
    lines = ShowInventoryHandler(unit_of_work(settings)).handle(low_stock_only=low_stock)

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'SKU':<20} {'Color':<10} {'Size':<6} {'Stock':>7} {'Reorder':>8}")
    click.echo("-" * 55)
    for line in lines:
        flag = "  LOW" if line.needs_reorder else ""
        click.echo(
            f"{line.sku:<20} {line.color:<10} {line.size:<6} {line.stock:>7} {line.reorder_point:>8}{flag}"
        )
