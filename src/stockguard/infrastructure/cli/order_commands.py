"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from stockguard.application.cancel_order import CancelOrderHandler
from stockguard.application.change_order_status import ChangeOrderStatusHandler
from stockguard.application.dto import OrderDTO, OrderItemSpec
from stockguard.application.place_order import PlaceOrderHandler
from stockguard.application.show_order import ShowOrderHandler
from stockguard.domain.exceptions import DomainException
from stockguard.domain.model.order import OrderStatus
from stockguard.infrastructure.bootstrap import unit_of_work
from stockguard.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'TSHIRT-RED-M:3,JEANS-32:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(f"Invalid item format '{pair}'. Expected 'SKU:Quantity'.")
        sku, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for SKU '{sku}'.")
        specs.append(OrderItemSpec(sku=sku.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'SKU':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(f"  {item.sku:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID placing the order.")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
@click.pass_obj
def order_place(settings: Settings, user_id: str, items: str) -> None:
    """Place an order (takes the units out of stock)."""
    specs = _parse_items(items)
    handler = PlaceOrderHandler(unit_of_work(settings))

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(unit_of_work(settings)).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


def _status_command(name: str, target: OrderStatus, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--id", "order_id", required=True, type=int, help="Order ID.")
    @click.pass_obj
    def command(settings: Settings, order_id: int) -> None:
        handler = ChangeOrderStatusHandler(unit_of_work(settings))
        try:
            handler.handle(order_id, target)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Order #{order_id} is now {target.value}.")

    return command


order_pay = _status_command("pay", OrderStatus.PAID, "Mark a pending order as paid.")
order_ship = _status_command("ship", OrderStatus.SHIPPED, "Mark a paid order as shipped.")
order_complete = _status_command("complete", OrderStatus.COMPLETED, "Mark a shipped order as completed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(settings: Settings, order_id: int) -> None:
    """Cancel an order (returns its units to stock)."""
    handler = CancelOrderHandler(unit_of_work(settings))

    try:
        changed = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if changed:
        click.echo(f"Order #{order_id} cancelled, stock restored.")
    else:
        click.echo(f"Order #{order_id} was already cancelled.")
