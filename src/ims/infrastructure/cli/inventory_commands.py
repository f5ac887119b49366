"""CLI commands for inventory management."""

from __future__ import annotations

from pathlib import Path

import click

from ims.application.adjust_stock import AdjustStockHandler
from ims.application.export_inventory import ExportInventoryHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.show_valuation import ShowValuationHandler
from ims.application.stock_alerts import ReorderSuggestionsHandler, StockAlertsHandler
from ims.application.stock_history import StockHistoryHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.notification import NotificationLevel
from ims.domain.model.stock import AlertSeverity, StockStatus
from ims.domain.service.reorder_advisor import SORT_KEYS, total_reorder_cost
from ims.infrastructure.bootstrap import activity_log, product_repository


@click.command("show")
@click.option(
    "--status",
    default=None,
    type=click.Choice([s.value for s in StockStatus]),
    help="Only show products in this stock status.",
)
def inventory_show(status: str | None) -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(product_repo=product_repository())
    lines = handler.handle(status=status)

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Stock':>7} {'Min':>6} {'Status':>14}")
    click.echo("-" * 57)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.product_name:<20} {line.stock:>7} "
            f"{line.min_level:>6} {line.status:>14}"
        )


@click.command("alerts")
@click.option(
    "--severity",
    default=None,
    type=click.Choice([s.value for s in AlertSeverity]),
    help="Only show alerts of this severity.",
)
def inventory_alerts(severity: str | None) -> None:
    """List low-stock and out-of-stock alerts, most urgent first."""
    handler = StockAlertsHandler(product_repo=product_repository())
    alerts = handler.handle(severity=severity)

    if not alerts:
        click.echo("All stock levels are healthy.")
        return

    for alert in alerts:
        click.echo(f"[{alert.severity.value.upper():<8}] {alert.message}")


@click.command("reorder")
@click.option(
    "--sort",
    "sort_by",
    default="priority",
    type=click.Choice(list(SORT_KEYS)),
    help="Order suggestions by priority, cost or name.",
)
def inventory_reorder(sort_by: str) -> None:
    """Suggest purchase quantities for products at or below their minimum."""
    handler = ReorderSuggestionsHandler(product_repo=product_repository())
    suggestions = handler.handle(sort_by=sort_by)

    if not suggestions:
        click.echo("Nothing needs reordering.")
        return

    click.echo(
        f"{'Product':<20} {'Stock':>6} {'Min':>6} {'Order':>6} {'Cost':>12} {'Priority':>9}"
    )
    click.echo("-" * 64)
    for s in suggestions:
        click.echo(
            f"{s.product_name:<20} {s.current_quantity:>6} {s.min_level:>6} "
            f"{s.suggested_quantity:>6} {str(s.reorder_cost):>12} {s.priority.value:>9}"
        )
    click.echo("-" * 64)
    click.echo(f"{'Total reorder cost':<40} {str(total_reorder_cost(suggestions)):>12}")


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--mode",
    required=True,
    type=click.Choice(["set", "increase", "decrease", "add", "subtract"]),
    help="How to apply the quantity.",
)
@click.option("--quantity", required=True, type=int, help="Quantity to set, add or remove.")
@click.option("--reason", default=None, help="Reason recorded in the stock history.")
def inventory_adjust(product_id: str, mode: str, quantity: int, reason: str | None) -> None:
    """Adjust the stock level of one product."""
    handler = AdjustStockHandler(product_repo=product_repository(), activity_log=activity_log())

    try:
        outcome = handler.handle(product_id, mode, quantity, reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for note in outcome.notifications:
        click.echo(note.message, err=note.level is not NotificationLevel.SUCCESS)


@click.command("valuation")
def inventory_valuation() -> None:
    """Summarise stock value by category and status."""
    handler = ShowValuationHandler(product_repo=product_repository())
    valuation = handler.handle()

    click.echo(f"Products:       {valuation.total_products} ({valuation.active_products} active)")
    click.echo(f"Units in stock: {valuation.total_units}")
    click.echo(f"Total value:    {valuation.total_value}")
    click.echo(f"Active value:   {valuation.active_value}")
    click.echo(f"Low stock:      {valuation.low_stock_items}")
    click.echo(f"Out of stock:   {valuation.out_of_stock_items}")
    click.echo(f"Avg. stock:     {valuation.average_stock_level:.1f} units")

    if not valuation.categories:
        return

    click.echo()
    click.echo(f"  {'Category':<16} {'Items':>6} {'Share':>7} {'Value':>12}")
    click.echo(f"  {'-'*44}")
    for c in valuation.categories:
        click.echo(f"  {c.label:<16} {c.count:>6} {str(c.percentage) + '%':>7} {str(c.value):>12}")


@click.command("export")
@click.option(
    "--format",
    "export_format",
    default="csv",
    type=click.Choice(["csv", "json"], case_sensitive=False),
    help="Output format.",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write to this file instead of the dated default name.",
)
@click.option("--stdout", "to_stdout", is_flag=True, default=False, help="Print instead of writing a file.")
def inventory_export(export_format: str, output: Path | None, to_stdout: bool) -> None:
    """Export every product with its stock status and value."""
    handler = ExportInventoryHandler(product_repo=product_repository())

    try:
        export = handler.handle(export_format)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if to_stdout:
        click.echo(export.content, nl=False)
        return

    target = output or Path(export.filename)
    target.write_text(export.content, encoding="utf-8")
    click.echo(f"Exported {export.row_count} products to {target}")


@click.command("history")
@click.option("--id", "product_id", default=None, help="Only show movements for this product.")
@click.option("--limit", default=50, type=int, help="Maximum number of entries.")
def inventory_history(product_id: str | None, limit: int) -> None:
    """Show recent stock movements, newest first."""
    handler = StockHistoryHandler(activity_log=activity_log())
    movements = handler.handle(product_id, limit=limit)

    if not movements:
        click.echo("No stock movements recorded.")
        return

    click.echo(f"{'Product':<8} {'Old':>6} {'New':>6} {'Change':>7}  Reason")
    click.echo("-" * 50)
    for m in movements:
        click.echo(
            f"{m.product_id or '-':<8} {m.old_quantity:>6} {m.new_quantity:>6} "
            f"{m.delta:>+7}  {m.reason}"
        )


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
def inventory_restock(product_id: str) -> None:
    """Quick restock: raise stock to the minimum level plus half again."""
    handler = AdjustStockHandler(product_repo=product_repository(), activity_log=activity_log())

    try:
        outcome = handler.restock(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for note in outcome.notifications:
        click.echo(note.message, err=note.level is not NotificationLevel.SUCCESS)
