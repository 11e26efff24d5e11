"""CLI commands for catalog variants."""

from __future__ import annotations

import click

from stockguard.application.add_variant import AddVariantHandler
from stockguard.application.list_variants import ListVariantsHandler
from stockguard.application.update_variant_price import UpdateVariantPriceHandler
from stockguard.domain.exceptions import DomainException
from stockguard.infrastructure.bootstrap import unit_of_work
from stockguard.infrastructure.config import Settings


@click.command("add")
@click.option("--product-id", required=True, type=int, help="Parent product ID.")
@click.option("--sku", required=True, help="Unique SKU code.")
@click.option("--color", required=True, help="Color name.")
@click.option("--size", required=True, help="Size label (e.g. M, 42).")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@click.option("--stock", "initial_stock", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--reorder-point", default=0, show_default=True, type=int, help="Low-stock threshold.")
@click.pass_obj
def variant_add(
    settings: Settings,
    product_id: int,
    sku: str,
    color: str,
    size: str,
    price: str,
    initial_stock: int,
    reorder_point: int,
) -> None:
    """Add a variant and its inventory record."""
    handler = AddVariantHandler(unit_of_work(settings))

    try:
        dto = handler.handle(
            product_id=product_id,
            sku=sku,
            color=color,
            size=size,
            price=price,
            initial_stock=initial_stock,
            reorder_point=reorder_point,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant #{dto.id} '{dto.sku}' added at {dto.price} (stock {initial_stock})")


@click.command("list")
@click.pass_obj
def variant_list(settings: Settings) -> None:
    """List all variants."""
    variants = ListVariantsHandler(unit_of_work(settings)).handle()

    if not variants:
        click.echo("No variants found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<20} {'Color':<10} {'Size':<6} {'Price':>10}")
    click.echo("-" * 56)
    for v in variants:
        click.echo(f"{v.id:<6} {v.sku:<20} {v.color:<10} {v.size:<6} {v.price:>10}")


@click.command("update-price")
@click.option("--sku", required=True, help="SKU code.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def variant_update_price(settings: Settings, sku: str, price: str) -> None:
    """Change a variant's price (existing orders keep theirs)."""
    handler = UpdateVariantPriceHandler(unit_of_work(settings))

    try:
        handler.handle(sku=sku, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant '{sku}' price updated to ${price}")
