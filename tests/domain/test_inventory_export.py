"""Unit tests for inventory export rendering."""

import json
from datetime import date

from ims.domain.model.bulk import ExportFormat
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.service.inventory_export import (
    EXPORT_COLUMNS,
    export_filename,
    export_row,
    render,
)


def _product() -> Product:
    return Product(
        id="1",
        name="Widget",
        sku="W-1",
        category="tools",
        price=Money.of("12.5"),
        cost=Money.of("4"),
        stock_quantity=3,
        min_stock_level=5,
    )


class TestExportRow:

    def test_columns_and_formatting(self):
        row = export_row(_product())

        assert list(row) == EXPORT_COLUMNS
        assert row["Price"] == "12.50"
        assert row["Cost"] == "4.00"
        assert row["Stock Status"] == "low_stock"
        assert row["Total Value"] == "37.50"
        assert row["Active"] == "Yes"

    def test_missing_cost_exported_as_zero(self):
        product = _product()
        product.cost = None
        assert export_row(product)["Cost"] == "0.00"


class TestRender:

    def test_csv_has_header_and_rows(self):
        content = render([export_row(_product())], ExportFormat.CSV)
        lines = content.splitlines()

        assert lines[0] == ",".join(EXPORT_COLUMNS)
        assert lines[1].startswith("W-1,Widget,tools,12.50,4.00,3,5,low_stock,37.50,Yes")

    def test_json_is_a_list_of_rows(self):
        content = render([export_row(_product())], ExportFormat.JSON)
        assert json.loads(content)[0]["Name"] == "Widget"

    def test_filename(self):
        assert export_filename(ExportFormat.CSV, date(2024, 3, 9)) == "inventory-export-2024-03-09.csv"
