"""Unit tests for the InventoryAllocationService domain service."""

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.document import SalesOrder
from ims.domain.model.pricing import LineItem
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.service.inventory_allocation_service import InventoryAllocationService
from tests.fakes import FakeActivityLog, FakeProductRepository


def _make_order(*lines: tuple[str | None, str, int]) -> SalesOrder:
    """Create an order with given (product_id, description, qty) tuples."""
    items = [
        LineItem.of(str(i), description, qty, "10.00", product_id=pid)
        for i, (pid, description, qty) in enumerate(lines, start=1)
    ]
    return SalesOrder.create("SO-2024-001", "Test", items)


def _make_products(*specs: tuple[str, str, int]) -> FakeProductRepository:
    """Create repo with (product_id, name, stock) tuples."""
    return FakeProductRepository([
        Product(id=pid, name=name, price=Money.of("10.00"), stock_quantity=stock)
        for pid, name, stock in specs
    ])


class TestAllocate:

    def test_allocates_all_lines(self):
        repo = _make_products(("1", "Widget", 100), ("2", "Gadget", 50))
        log = FakeActivityLog()
        order = _make_order(("1", "Widget", 10), ("2", "Gadget", 5))

        result = InventoryAllocationService(repo, log).allocate(order)

        assert result.is_complete
        assert repo.get_by_id("1").stock_quantity == 90
        assert repo.get_by_id("2").stock_quantity == 45
        assert all(item.inventory_allocated for item in order.items)
        assert [m.reason for m in log.movements] == [
            "order_allocation:SO-2024-001",
            "order_allocation:SO-2024-001",
        ]

    def test_short_line_left_unallocated_others_proceed(self):
        repo = _make_products(("1", "Widget", 100), ("2", "Gadget", 3))
        order = _make_order(("1", "Widget", 10), ("2", "Gadget", 5))

        result = InventoryAllocationService(repo).allocate(order)

        assert result.allocated == 1
        assert result.short_items == ["Gadget"]
        assert repo.get_by_id("1").stock_quantity == 90
        assert repo.get_by_id("2").stock_quantity == 3
        assert not order.items[1].inventory_allocated

    def test_custom_lines_skipped(self):
        repo = _make_products(("1", "Widget", 10))
        order = _make_order(("1", "Widget", 1), (None, "Installation", 1))

        result = InventoryAllocationService(repo).allocate(order)

        assert result.total == 1
        assert result.is_complete

    def test_missing_product_reported_short(self):
        order = _make_order(("9", "Ghost", 1))
        result = InventoryAllocationService(_make_products()).allocate(order)
        assert result.short_items == ["Ghost"]

    def test_reallocation_does_not_deduct_twice(self):
        repo = _make_products(("1", "Widget", 100))
        order = _make_order(("1", "Widget", 10))
        svc = InventoryAllocationService(repo)

        svc.allocate(order)
        result = svc.allocate(order)

        assert result.allocated == 1
        assert repo.get_by_id("1").stock_quantity == 90

    def test_cancelled_order_rejected(self):
        order = _make_order(("1", "Widget", 1))
        order.cancel()
        with pytest.raises(ValidationError, match="cancelled"):
            InventoryAllocationService(_make_products()).allocate(order)


class TestRelease:

    def test_returns_allocated_stock(self):
        repo = _make_products(("1", "Widget", 100), ("2", "Gadget", 2))
        log = FakeActivityLog()
        order = _make_order(("1", "Widget", 10), ("2", "Gadget", 5))
        svc = InventoryAllocationService(repo, log)
        svc.allocate(order)

        released = svc.release(order)

        assert released == 1
        assert repo.get_by_id("1").stock_quantity == 100
        assert repo.get_by_id("2").stock_quantity == 2
        assert log.movements[-1].delta == 10
        assert not any(item.inventory_allocated for item in order.items)
