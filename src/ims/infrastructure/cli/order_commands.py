"""CLI commands for the SalesOrder aggregate."""

from __future__ import annotations

import click

from ims.application.allocate_order import AllocateOrderHandler
from ims.application.cancel_order import CancelOrderHandler
from ims.application.generate_invoice import GenerateInvoiceHandler
from ims.application.order_status import ACTIONS, UpdateOrderStatusHandler
from ims.application.record_payment import RecordPaymentHandler
from ims.application.show_order import ShowOrderHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import activity_log, order_repository, product_repository
from ims.infrastructure.cli.quotation_commands import display_document


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_document(dto, "Sales order")
    click.echo()
    for item in dto.items:
        mark = "allocated" if item.allocated else "not allocated"
        click.echo(f"  {item.description:<24} {mark}")


@click.command("allocate")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to allocate.")
def order_allocate(order_id: int) -> None:
    """Deduct stock for the order's catalog lines (confirms a pending order)."""
    handler = AllocateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        activity_log=activity_log(),
    )

    try:
        result = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id}: {result.allocated}/{result.total} lines allocated.")
    for description in result.short_items:
        click.echo(f"  insufficient stock: {description}", err=True)


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--amount", required=True, help="Amount received (e.g. 50.00).")
def order_pay(order_id: int, amount: str) -> None:
    """Record a customer payment against an order."""
    handler = RecordPaymentHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Order {dto.number}: {dto.amount_paid} of {dto.total} paid "
        f"(payment status={dto.payment_status})"
    )


@click.command("invoice")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to invoice.")
def order_invoice(order_id: int) -> None:
    """Render the invoice for an order."""
    handler = GenerateInvoiceHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_document(dto, "Invoice")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("action", type=click.Choice(list(ACTIONS)))
def order_status(order_id: int, action: str) -> None:
    """Move an order along: confirm, process, ship or deliver."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, action)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.number} is now {dto.status}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (returns allocated stock)."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        activity_log=activity_log(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")
