"""Unit tests for stock status classification and alerts."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ims.domain.model.product import Product
from ims.domain.model.stock import AlertSeverity, StockStatus
from ims.domain.model.value_objects import Money
from ims.domain.service.stock_classifier import classify_stock, evaluate_alert, stock_alerts


def _product(pid="1", name="Widget", quantity=0, min_level=10, active=True) -> Product:
    return Product(
        id=pid,
        name=name,
        price=Money.of("10.00"),
        stock_quantity=quantity,
        min_stock_level=min_level,
        is_active=active,
    )


class TestClassifyStock:

    @pytest.mark.parametrize(
        "quantity, min_level, expected",
        [
            (0, 10, StockStatus.OUT_OF_STOCK),
            (0, 0, StockStatus.OUT_OF_STOCK),
            (5, 10, StockStatus.LOW_STOCK),
            (10, 10, StockStatus.LOW_STOCK),
            (11, 10, StockStatus.NORMAL),
            (1, 0, StockStatus.NORMAL),
        ],
    )
    def test_boundaries(self, quantity, min_level, expected):
        assert classify_stock(quantity, min_level) is expected

    def test_inactive_wins_over_quantity(self):
        assert classify_stock(0, 10, is_active=False) is StockStatus.INACTIVE

    @given(st.integers(min_value=0, max_value=10_000), st.integers(min_value=0, max_value=10_000))
    def test_active_statuses_partition_quantities(self, quantity, min_level):
        status = classify_stock(quantity, min_level)
        if quantity == 0:
            assert status is StockStatus.OUT_OF_STOCK
        elif quantity <= min_level:
            assert status is StockStatus.LOW_STOCK
        else:
            assert status is StockStatus.NORMAL


class TestEvaluateAlert:

    def test_out_of_stock_is_critical(self):
        alert = evaluate_alert(_product(quantity=0))
        assert alert.severity is AlertSeverity.CRITICAL
        assert alert.message == "Widget is out of stock"

    def test_half_minimum_is_high(self):
        alert = evaluate_alert(_product(quantity=5, min_level=10))
        assert alert.severity is AlertSeverity.HIGH
        assert alert.message == "Widget is critically low (5 remaining)"

    def test_odd_minimum_uses_exact_half(self):
        # 3 * 0.5 = 1.5: one unit is critically low, two are not
        assert evaluate_alert(_product(quantity=1, min_level=3)).severity is AlertSeverity.HIGH
        assert evaluate_alert(_product(quantity=2, min_level=3)).severity is AlertSeverity.MEDIUM

    def test_below_minimum_is_medium(self):
        alert = evaluate_alert(_product(quantity=6, min_level=10))
        assert alert.severity is AlertSeverity.MEDIUM
        assert alert.message == "Widget is below minimum stock level (6/10)"

    def test_at_minimum_is_medium(self):
        assert evaluate_alert(_product(quantity=10, min_level=10)).severity is AlertSeverity.MEDIUM

    def test_above_minimum_has_no_alert(self):
        assert evaluate_alert(_product(quantity=11, min_level=10)) is None

    def test_inactive_product_has_no_alert(self):
        assert evaluate_alert(_product(quantity=0, active=False)) is None

    @given(st.integers(min_value=0, max_value=1_000), st.integers(min_value=0, max_value=1_000))
    def test_alert_raised_exactly_at_or_below_minimum(self, quantity, min_level):
        alert = evaluate_alert(_product(quantity=quantity, min_level=min_level))
        assert (alert is not None) == (quantity <= min_level)


class TestStockAlerts:

    def test_ordered_by_severity_then_quantity(self):
        products = [
            _product("1", "Medium", quantity=8, min_level=10),
            _product("2", "HighA", quantity=4, min_level=10),
            _product("3", "Empty", quantity=0, min_level=10),
            _product("4", "HighB", quantity=2, min_level=10),
            _product("5", "Fine", quantity=50, min_level=10),
        ]

        alerts = stock_alerts(products)

        assert [a.product_name for a in alerts] == ["Empty", "HighB", "HighA", "Medium"]
