"""Inventory export rows and their JSON / CSV rendering."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable
from datetime import date
from typing import Any

from ims.domain.model.bulk import ExportFormat
from ims.domain.model.product import Product
from ims.domain.service.stock_classifier import product_status

EXPORT_COLUMNS = [
    "SKU",
    "Name",
    "Category",
    "Price",
    "Cost",
    "Current Stock",
    "Min Stock Level",
    "Stock Status",
    "Total Value",
    "Active",
]


def export_row(product: Product) -> dict[str, Any]:
    return {
        "SKU": product.sku,
        "Name": product.name,
        "Category": product.category,
        "Price": f"{product.price.amount:.2f}",
        "Cost": f"{product.cost.amount:.2f}" if product.cost is not None else "0.00",
        "Current Stock": product.stock_quantity,
        "Min Stock Level": product.min_stock_level,
        "Stock Status": product_status(product).value,
        "Total Value": f"{product.inventory_value.amount:.2f}",
        "Active": "Yes" if product.is_active else "No",
    }


def render(rows: Iterable[dict[str, Any]], export_format: ExportFormat) -> str:
    rows = list(rows)
    if export_format is ExportFormat.JSON:
        return json.dumps(rows, indent=2) + "\n"

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=EXPORT_COLUMNS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def export_filename(export_format: ExportFormat, on: date | None = None) -> str:
    on = on or date.today()
    return f"inventory-export-{on.isoformat()}.{export_format.value}"
