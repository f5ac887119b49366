"""Integration tests for product catalog use cases."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.bulk_update import BulkOperationHandler
from ims.application.export_inventory import ExportInventoryHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.show_valuation import ShowValuationHandler
from ims.application.stock_alerts import ReorderSuggestionsHandler, StockAlertsHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import ProductNotFound, ValidationError
from ims.domain.model.value_objects import Money
from tests.fakes import FakeActivityLog, FakeProductRepository


def _catalog() -> FakeProductRepository:
    repo = FakeProductRepository()
    add = AddProductHandler(repo)
    add.handle("Widget", "15.00", sku="W-1", category="Tools", stock_quantity=0, min_stock_level=5)
    add.handle("Gadget", "25.00", sku="G-1", cost="12.00", stock_quantity=3, min_stock_level=10)
    add.handle("Doohickey", "2.00", stock_quantity=100, min_stock_level=10)
    return repo


class TestAddProduct:

    def test_ids_are_sequential(self):
        assert [p.id for p in _catalog().list_all()] == ["1", "2", "3"]

    def test_category_normalised(self):
        assert _catalog().get_by_name("widget").category == "tools"

    def test_duplicate_name_rejected(self):
        repo = _catalog()
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo).handle("WIDGET", "1.00")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeProductRepository()).handle("Bolt", "1.00", stock_quantity=-1)


class TestUpdateProduct:

    def test_updates_only_given_fields(self):
        repo = _catalog()

        product = UpdateProductHandler(repo).handle("2", price="30", min_stock_level=2)

        assert product.price == Money.of("30")
        assert product.min_stock_level == 2
        assert product.category == "other"

    def test_deactivate_hides_alerts(self):
        repo = _catalog()
        UpdateProductHandler(repo).handle("1", active=False)

        names = [a.product_name for a in StockAlertsHandler(repo).handle()]

        assert names == ["Gadget"]

    def test_unknown_product(self):
        with pytest.raises(ProductNotFound):
            UpdateProductHandler(_catalog()).handle("99", price="1")


class TestQueries:

    def test_inventory_filtered_by_status(self):
        lines = ShowInventoryHandler(_catalog()).handle(status="out_of_stock")
        assert [line.product_name for line in lines] == ["Widget"]

    def test_alerts_filtered_by_severity(self):
        alerts = StockAlertsHandler(_catalog()).handle(severity="high")
        assert [a.product_name for a in alerts] == ["Gadget"]

    def test_reorder_suggestions(self):
        suggestions = ReorderSuggestionsHandler(_catalog()).handle(sort_by="cost")
        assert [(s.product_name, str(s.reorder_cost)) for s in suggestions] == [
            ("Gadget", "$240.00"),
            ("Widget", "$225.00"),
        ]

    def test_valuation(self):
        valuation = ShowValuationHandler(_catalog()).handle()
        assert valuation.total_value == Money.of("275.00")
        assert valuation.out_of_stock_items == 1


class TestBulkOperationHandler:

    def test_invalid_parameters_raise_before_any_change(self):
        repo = _catalog()
        with pytest.raises(ValidationError):
            BulkOperationHandler(repo).handle("update_price", ["1"], {"mode": "set_price"})
        assert repo.get_by_id("1").price == Money.of("15.00")

    def test_partial_failure_reported_per_item(self):
        repo = _catalog()
        log = FakeActivityLog()

        report = BulkOperationHandler(repo, log).handle(
            "update_stock", ["1", "7", "1"], {"mode": "add", "quantity": "4"}
        )

        assert [(r.product_id, r.success) for r in report.results] == [("1", True), ("7", False)]
        assert repo.get_by_id("1").stock_quantity == 4
        assert len(log.movements) == 1


class TestExportInventory:

    def test_csv_export(self):
        export = ExportInventoryHandler(_catalog()).handle("csv")

        assert export.row_count == 3
        assert export.filename.endswith(".csv")
        assert export.content.splitlines()[1].startswith("W-1,Widget,tools,15.00,0.00,0,5,out_of_stock")

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported export format"):
            ExportInventoryHandler(_catalog()).handle("xml")
