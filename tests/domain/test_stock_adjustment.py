"""Unit tests for the stock adjustment engine."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ims.domain.exceptions import InvalidAdjustment, ValidationError
from ims.domain.model.stock import AdjustmentMode, StockAdjustment
from ims.domain.service.stock_adjustment import DEFAULT_REASON, apply_adjustment

counts = st.integers(min_value=0, max_value=100_000)


class TestStockAdjustmentParsing:

    @pytest.mark.parametrize(
        "raw, mode",
        [
            ("set", AdjustmentMode.SET),
            ("increase", AdjustmentMode.INCREASE),
            ("add", AdjustmentMode.INCREASE),
            ("Subtract", AdjustmentMode.DECREASE),
        ],
    )
    def test_modes_and_aliases(self, raw, mode):
        assert StockAdjustment.of(raw, 1).mode is mode

    def test_string_value_parsed(self):
        assert StockAdjustment.of("set", " 12 ").value == 12

    def test_unknown_mode_rejected(self):
        with pytest.raises(InvalidAdjustment, match="Unknown adjustment mode"):
            StockAdjustment.of("multiply", 2)

    def test_negative_value_rejected(self):
        with pytest.raises(InvalidAdjustment, match="cannot be negative"):
            StockAdjustment.of("increase", -3)

    def test_non_integer_value_rejected(self):
        with pytest.raises(InvalidAdjustment, match="must be an integer"):
            StockAdjustment.of("set", "2.5")

    def test_invalid_adjustment_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            StockAdjustment.of("set", True)


class TestApplyAdjustment:

    def test_set(self):
        result = apply_adjustment(3, StockAdjustment.of("set", 10))
        assert result.new_quantity == 10
        assert result.movement.delta == 7
        assert not result.clamped

    def test_increase(self):
        assert apply_adjustment(3, StockAdjustment.of("increase", 4)).new_quantity == 7

    def test_decrease_to_exactly_zero_is_not_clamped(self):
        result = apply_adjustment(5, StockAdjustment.of("decrease", 5))
        assert result.new_quantity == 0
        assert not result.clamped

    def test_decrease_past_zero_is_clamped(self):
        result = apply_adjustment(5, StockAdjustment.of("decrease", 10))
        assert result.new_quantity == 0
        assert result.clamped
        assert result.movement.delta == -5

    def test_default_reason(self):
        assert apply_adjustment(1, StockAdjustment.of("set", 2)).movement.reason == DEFAULT_REASON

    def test_custom_reason(self):
        movement = apply_adjustment(1, StockAdjustment.of("set", 2), "cycle_count").movement
        assert movement.reason == "cycle_count"

    def test_negative_current_quantity_rejected(self):
        with pytest.raises(InvalidAdjustment, match="cannot be negative"):
            apply_adjustment(-1, StockAdjustment.of("set", 2))

    def test_movement_has_no_product_until_bound(self):
        movement = apply_adjustment(1, StockAdjustment.of("set", 2)).movement
        assert movement.product_id is None
        assert movement.for_product("7").product_id == "7"

    @given(counts, st.sampled_from(list(AdjustmentMode)), counts)
    def test_result_never_negative_and_delta_consistent(self, current, mode, value):
        result = apply_adjustment(current, StockAdjustment(mode, value))
        assert result.new_quantity >= 0
        assert result.movement.old_quantity == current
        assert result.movement.delta == result.new_quantity - current

    @given(counts, counts)
    def test_set_is_idempotent(self, current, value):
        adjustment = StockAdjustment(AdjustmentMode.SET, value)
        once = apply_adjustment(current, adjustment).new_quantity
        twice = apply_adjustment(once, adjustment).new_quantity
        assert once == twice == value
