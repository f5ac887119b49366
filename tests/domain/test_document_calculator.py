"""Unit tests for document totals."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import InvalidDiscount
from ims.domain.model.pricing import Discount, DiscountType, LineItem
from ims.domain.model.value_objects import Money, Percentage
from ims.domain.service.document_calculator import calculate_totals

TEN_PERCENT = Percentage(Decimal("10"))


def _items(*lines: tuple[int, str]) -> list[LineItem]:
    return [
        LineItem.of(str(i), f"Item {i}", qty, price)
        for i, (qty, price) in enumerate(lines, start=1)
    ]


class TestCalculateTotals:

    def test_percentage_discount_then_tax(self):
        totals = calculate_totals(
            _items((2, "10.00")), TEN_PERCENT, Discount.of("percentage", "50")
        )

        assert totals.subtotal == Money.of("20.00")
        assert totals.discount_amount == Money.of("10.00")
        assert totals.taxable_base == Money.of("10.00")
        assert totals.tax == Money.of("1.00")
        assert totals.total == Money.of("11.00")

    def test_no_discount(self):
        totals = calculate_totals(_items((1, "15.00"), (3, "2.50")), TEN_PERCENT)
        assert totals.subtotal == Money.of("22.50")
        assert totals.tax == Money.of("2.25")
        assert totals.total == Money.of("24.75")

    def test_discount_larger_than_subtotal_floors_at_zero(self):
        totals = calculate_totals(_items((1, "5.00")), TEN_PERCENT, Discount.of("fixed", "20"))

        assert totals.taxable_base == Money.zero()
        assert totals.tax == Money.zero()
        assert totals.total == Money.zero()

    def test_tax_rounded_half_up(self):
        totals = calculate_totals(_items((1, "0.05")), TEN_PERCENT)
        assert totals.tax == Money.of("0.01")

    def test_empty_document(self):
        assert calculate_totals([], TEN_PERCENT).total == Money.zero()

    def test_line_total_follows_quantity(self):
        items = _items((2, "3.00"))
        items[0].update_quantity(5)
        assert items[0].line_total == Money.of("15.00")
        assert calculate_totals(items, Percentage(Decimal("0"))).total == Money.of("15.00")


class TestDiscount:

    @pytest.mark.parametrize(
        "raw, dtype, value",
        [("15%", DiscountType.PERCENTAGE, "15"), ("25.00", DiscountType.FIXED, "25.00")],
    )
    def test_parse(self, raw, dtype, value):
        d = Discount.parse(raw)
        assert d.type is dtype
        assert d.value == Decimal(value)

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidDiscount, match="Unknown discount type"):
            Discount.of("bogus", "5")

    def test_negative_value_rejected(self):
        with pytest.raises(InvalidDiscount, match="cannot be negative"):
            Discount.of("fixed", "-5")

    def test_non_numeric_value_rejected(self):
        with pytest.raises(InvalidDiscount):
            Discount.parse("ten%")

    def test_display(self):
        assert str(Discount.parse("12.5%")) == "12.5%"
        assert str(Discount.parse("3")) == "$3.00"
