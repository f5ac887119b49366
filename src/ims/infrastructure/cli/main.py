import click

from ims.infrastructure.cli.inventory_commands import (
    inventory_adjust,
    inventory_alerts,
    inventory_export,
    inventory_history,
    inventory_reorder,
    inventory_restock,
    inventory_show,
    inventory_valuation,
)
from ims.infrastructure.cli.order_commands import (
    order_allocate,
    order_cancel,
    order_invoice,
    order_pay,
    order_show,
    order_status,
)
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_bulk,
    product_list,
    product_update,
)
from ims.infrastructure.cli.quotation_commands import (
    quotation_convert,
    quotation_create,
    quotation_show,
    quotation_status,
)
from ims.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logs on stderr.")
def cli(verbose: bool) -> None:
    """IMS — Inventory & Sales Document Manager"""
    configure_logging(verbose)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Stock levels, alerts and valuation."""


@cli.group()
def quotation() -> None:
    """Manage quotations."""


@cli.group()
def order() -> None:
    """Manage sales orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_bulk)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_alerts)
inventory.add_command(inventory_export)
inventory.add_command(inventory_history)
inventory.add_command(inventory_reorder)
inventory.add_command(inventory_restock)
inventory.add_command(inventory_show)
inventory.add_command(inventory_valuation)
quotation.add_command(quotation_convert)
quotation.add_command(quotation_create)
quotation.add_command(quotation_show)
quotation.add_command(quotation_status)
order.add_command(order_allocate)
order.add_command(order_cancel)
order.add_command(order_invoice)
order.add_command(order_pay)
order.add_command(order_show)
order.add_command(order_status)
