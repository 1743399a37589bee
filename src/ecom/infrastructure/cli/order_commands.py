"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ecom.application.change_order_items import ChangeOrderItemsHandler
from ecom.application.dto import OrderDTO, OrderItemSpec
from ecom.application.place_order import PlaceOrderHandler
from ecom.application.show_order import ListOrdersHandler, ShowOrderHandler
from ecom.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
)
from ecom.infrastructure.cli._errors import CLI_ERRORS, to_click_exception
from ecom.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--id", "order_id", default=None, help="Order ID (generated if omitted).")
@click.pass_obj
def order_place(settings: Settings, customer_id: str, items: str, order_id: str | None) -> None:
    """Place a new order."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        order_repo=order_repository(settings),
        product_repo=product_repository(settings),
        customer_repo=customer_repository(settings),
    )

    try:
        dto = handler.handle(customer_id=customer_id, item_specs=specs, order_id=order_id)
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    click.echo("Order placed.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    _display_order(dto)


@click.command("list")
@click.pass_obj
def order_list(settings: Settings) -> None:
    """List all orders."""
    try:
        orders = ListOrdersHandler(order_repo=order_repository(settings)).handle()
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'Customer':<38} {'Items':>5} {'Total':>10}")
    click.echo("-" * 94)
    for dto in orders:
        click.echo(f"{dto.id:<38} {dto.customer_id:<38} {len(dto.items):>5} {dto.total:>10}")


@click.command("change-items")
@click.option("--id", "order_id", required=True, help="Order ID to change.")
@click.option("--items", required=True, help="New items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_change_items(settings: Settings, order_id: str, items: str) -> None:
    """Replace every item of an existing order."""
    specs = _parse_items(items)

    handler = ChangeOrderItemsHandler(
        order_repo=order_repository(settings),
        product_repo=product_repository(settings),
    )

    try:
        dto = handler.handle(order_id=order_id, item_specs=specs)
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    click.echo("Order items replaced.")
    _display_order(dto)
