"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, Percentage, Quantity, to_decimal


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_has_no_binary_noise(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1") + Money(Decimal("1"), "EUR")

    def test_multiplication_by_int(self):
        assert Money.of("15.00") * 3 == Money.of("45.00")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * True

    def test_rounding_is_half_up(self):
        assert Money.of("2.345").rounded().amount == Decimal("2.35")
        assert Money.of("2.344").rounded().amount == Decimal("2.34")

    def test_clamped_floors_at_zero(self):
        assert Money.clamped(Decimal("-3.20")) == Money.zero()
        assert Money.clamped(Decimal("3.20")) == Money.of("3.20")

    def test_comparison(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10.00")

    def test_display(self):
        assert str(Money.of("7.5")) == "$7.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-1)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    def test_of_amount(self):
        assert Percentage(Decimal("10")).of(Decimal("50")) == Decimal("5")

    @pytest.mark.parametrize("value", ["-1", "100.01"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.from_value(value)

    def test_display(self):
        assert str(Percentage(Decimal("10"))) == "10%"
        assert str(Percentage.from_value("7.50")) == "7.5%"


class TestToDecimal:

    @pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", True])
    def test_invalid_numbers_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid number"):
            to_decimal(raw)
