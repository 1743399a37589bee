"""CLI commands for the Product and Customer aggregates."""

from __future__ import annotations

import click

from ecom.application.add_product import AddProductHandler
from ecom.application.register_customer import RegisterCustomerHandler
from ecom.domain.model.customer import Address
from ecom.infrastructure.bootstrap import customer_repository, product_repository
from ecom.infrastructure.cli._errors import CLI_ERRORS, to_click_exception
from ecom.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--id", "product_id", default=None, help="Product ID (generated if omitted).")
@click.pass_obj
def product_add(settings: Settings, name: str, price: str, product_id: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(name=name, price=price, product_id=product_id)
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        products = product_repository(settings).find_all()
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10}")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<38} {p.name:<20} {str(p.price):>10}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--id", "customer_id", default=None, help="Customer ID (generated if omitted).")
@click.option("--street", default=None)
@click.option("--number", type=int, default=None)
@click.option("--zip", "zip_code", default=None)
@click.option("--city", default=None)
@click.pass_obj
def customer_add(
    settings: Settings,
    name: str,
    customer_id: str | None,
    street: str | None,
    number: int | None,
    zip_code: str | None,
    city: str | None,
) -> None:
    """Register a customer. Giving a full address activates it."""
    handler = RegisterCustomerHandler(customer_repo=customer_repository(settings))

    try:
        address = None
        if street or number or zip_code or city:
            address = Address(street=street or "", number=number or 0,
                              zip_code=zip_code or "", city=city or "")
        customer = handler.handle(name=name, address=address, customer_id=customer_id)
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)

    state = "active" if customer.active else "inactive"
    click.echo(f"Customer {customer.id} '{customer.name}' registered ({state})")
