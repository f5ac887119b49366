"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.bulk_update import BulkOperationHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.bulk import BulkOperationKind, ExportFormat, PriceChangeMode
from ims.domain.service.inventory_export import render
from ims.infrastructure.bootstrap import activity_log, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--sku", default="", help="Stock keeping unit.")
@click.option("--category", default="other", help="Category (e.g. electronics).")
@click.option("--cost", default=None, help="Unit cost, used for reorder costing.")
@click.option("--stock", "stock_quantity", default=0, type=int, help="Initial stock quantity.")
@click.option("--min-stock", "min_stock_level", default=0, type=int, help="Minimum stock level.")
def product_add(
    name: str,
    price: str,
    sku: str,
    category: str,
    cost: str | None,
    stock_quantity: int,
    min_stock_level: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            sku=sku,
            category=category,
            cost=cost,
            stock_quantity=stock_quantity,
            min_stock_level=min_stock_level,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<10} {'Name':<20} {'Category':<14} {'Price':>10} {'Active':>7}")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.sku:<10} {p.name:<20} {p.category:<14} "
            f"{str(p.price):>10} {'yes' if p.is_active else 'no':>7}"
        )


@click.command("bulk")
@click.argument(
    "operation",
    type=click.Choice([k.value for k in BulkOperationKind]),
)
@click.option("--ids", required=True, help="Comma-separated product IDs.")
@click.option(
    "--mode",
    default=None,
    help=(
        "update_price: " + "/".join(m.value for m in PriceChangeMode)
        + "; update_stock: set/add/subtract."
    ),
)
@click.option("--value", default=None, help="Price change value (update_price).")
@click.option("--quantity", default=None, help="Stock quantity (update_stock).")
@click.option("--category", default=None, help="New category (update_category).")
@click.option(
    "--format",
    "export_format",
    type=click.Choice([f.value for f in ExportFormat], case_sensitive=False),
    default=ExportFormat.CSV.value,
    help="Export format (export).",
)
@click.option("--level", default=None, help="New minimum stock level (update_min_stock).")
@click.option("--reason", default=None, help="Movement reason (update_stock).")
@click.option("--yes", is_flag=True, default=False, help="Skip the delete confirmation.")
def product_bulk(
    operation: str,
    ids: str,
    mode: str | None,
    value: str | None,
    quantity: str | None,
    category: str | None,
    export_format: str,
    reason: str | None,
    level: str | None,
    yes: bool,
) -> None:
    """Apply one operation to several products, reporting each result."""
    product_ids = [pid.strip() for pid in ids.split(",") if pid.strip()]

    if operation == BulkOperationKind.DELETE.value and not yes:
        click.confirm(
            f"Permanently delete {len(set(product_ids))} products? This cannot be undone",
            abort=True,
        )

    handler = BulkOperationHandler(product_repository(), activity_log())
    params = {
        "mode": mode,
        "value": value,
        "quantity": quantity,
        "category": category,
        "format": export_format,
        "reason": reason,
        "level": level,
    }

    try:
        report = handler.handle(operation, product_ids, params)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if operation == BulkOperationKind.EXPORT.value:
        click.echo(render(report.exported_rows(), ExportFormat(export_format.lower())), nl=False)
    else:
        for result in report.results:
            if result.success:
                detail = "" if result.new_value is None else f" -> {result.new_value}"
                click.echo(f"  ok    #{result.product_id}{detail}")
            else:
                click.echo(f"  FAIL  #{result.product_id}: {result.error}")

    click.echo(report.notification.message, err=True)
    if not report.all_succeeded:
        raise SystemExit(1)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price.")
@click.option("--category", default=None, help="New category.")
@click.option("--min-stock", "min_stock_level", default=None, type=int, help="New minimum stock level.")
@click.option("--active/--inactive", default=None, help="Reactivate or deactivate the product.")
def product_update(
    product_id: str,
    price: str | None,
    category: str | None,
    min_stock_level: int | None,
    active: bool | None,
) -> None:
    """Update price, category, minimum stock level or active flag."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id,
            price=price,
            category=category,
            min_stock_level=min_stock_level,
            active=active,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}': {product.price}, {product.category}, "
        f"min {product.min_stock_level}, {'active' if product.is_active else 'inactive'}"
    )
