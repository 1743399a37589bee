import click

from ecom.infrastructure.bootstrap import engine
from ecom.infrastructure.cli._errors import CLI_ERRORS, to_click_exception
from ecom.infrastructure.cli.catalog_commands import customer_add, product_add, product_list
from ecom.infrastructure.cli.order_commands import (
    order_change_items,
    order_list,
    order_place,
    order_show,
)
from ecom.infrastructure.config import Settings
from ecom.infrastructure.logging import configure_logging
from ecom.infrastructure.persistence.database import init_schema


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """ecom — customers, products and orders"""
    settings = Settings()
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


@db.command("init")
@click.pass_obj
def db_init(settings: Settings) -> None:
    """Create the tables."""
    try:
        init_schema(engine(settings))
    except CLI_ERRORS as exc:
        raise to_click_exception(exc)
    click.echo("Database initialized.")


# Register subcommands
customer.add_command(customer_add)
product.add_command(product_add)
product.add_command(product_list)
order.add_command(order_change_items)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
