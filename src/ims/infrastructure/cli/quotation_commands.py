"""CLI commands for the Quotation aggregate."""

from __future__ import annotations

import click

from ims.application.convert_quotation import ConvertQuotationHandler
from ims.application.create_quotation import CreateQuotationHandler
from ims.application.dto import DocumentDTO, LineItemSpec
from ims.application.quotation_status import (
    ACTIONS,
    ShowQuotationHandler,
    UpdateQuotationStatusHandler,
)
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    quotation_repository,
)


def _parse_item(pair: str, custom: bool) -> LineItemSpec:
    """Parse 'Widget:3' or 'Widget:3@12.50' into a LineItemSpec."""
    pair = pair.strip()
    price = None
    if "@" in pair:
        pair, price = pair.rsplit("@", 1)
        price = price.strip()
    if ":" not in pair:
        raise click.BadParameter(
            f"Invalid item format '{pair}'. Expected 'Name:Quantity[@Price]'."
        )
    name, qty_str = pair.rsplit(":", 1)
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for item '{name}'."
        )
    return LineItemSpec(product_name=name.strip(), quantity=qty, unit_price=price, custom=custom)


def _parse_items(raw: str | None, custom: bool = False) -> list[LineItemSpec]:
    """Parse 'Widget:3,Gadget:5@9.99' into a LineItemSpec list."""
    if not raw:
        return []
    return [_parse_item(pair, custom) for pair in raw.split(",") if pair.strip()]


def display_document(dto: DocumentDTO, title: str) -> None:
    """Shared formatting for quotations, orders and invoices."""
    click.echo(f"{title} {dto.number}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.reference:
        click.echo(f"Ref:      {dto.reference}")
    if dto.payment_status is not None:
        click.echo(f"Payment:  {dto.payment_status} ({dto.amount_paid} paid)")
    click.echo()

    click.echo(f"  {'Item':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.description:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>22}")
    if dto.discount_amount != "$0.00":
        click.echo(f"  {'Discount (' + dto.discount + ')':<30} {'-' + dto.discount_amount:>22}")
    click.echo(f"  {'Tax (' + dto.tax_rate + ')':<30} {dto.tax:>22}")
    click.echo(f"  {'Total':<30} {dto.total:>22}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", default=None, help="Catalog items as 'Product:Qty[@Price],...'.")
@click.option("--custom", "custom_items", default=None, help="Custom items as 'Description:Qty@Price,...'.")
@click.option("--tax-rate", default=None, help="Tax rate in percent (default 10).")
@click.option("--discount", default=None, help="'15%' or a fixed amount such as '25.00'.")
def quotation_create(
    customer: str,
    items: str | None,
    custom_items: str | None,
    tax_rate: str | None,
    discount: str | None,
) -> None:
    """Create a draft quotation."""
    specs = _parse_items(items) + _parse_items(custom_items, custom=True)

    handler = CreateQuotationHandler(
        quotation_repo=quotation_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(
            customer_name=customer,
            item_specs=specs,
            tax_rate=tax_rate,
            discount=discount,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quotation #{dto.id} created")
    display_document(dto, "Quotation")


@click.command("show")
@click.option("--id", "quotation_id", required=True, type=int, help="Quotation ID to display.")
def quotation_show(quotation_id: int) -> None:
    """Show details of an existing quotation."""
    handler = ShowQuotationHandler(quotation_repo=quotation_repository())

    try:
        dto = handler.handle(quotation_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_document(dto, "Quotation")


@click.command("status")
@click.option("--id", "quotation_id", required=True, type=int, help="Quotation ID.")
@click.argument("action", type=click.Choice(list(ACTIONS)))
def quotation_status(quotation_id: int, action: str) -> None:
    """Send, accept, reject or expire a quotation."""
    handler = UpdateQuotationStatusHandler(quotation_repo=quotation_repository())

    try:
        dto = handler.handle(quotation_id, action)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quotation {dto.number} is now {dto.status}.")


@click.command("convert")
@click.option("--id", "quotation_id", required=True, type=int, help="Quotation ID to convert.")
def quotation_convert(quotation_id: int) -> None:
    """Convert a quotation into a sales order."""
    handler = ConvertQuotationHandler(
        quotation_repo=quotation_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(quotation_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created from quotation")
    display_document(dto, "Sales order")
