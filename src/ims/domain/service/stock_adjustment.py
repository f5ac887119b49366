"""Domain service: stock adjustments.

Applies a validated ``StockAdjustment`` to a quantity and reports what
actually happened. Nothing is persisted here; writing the new quantity
back and logging the movement is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import InvalidAdjustment
from ims.domain.model.stock import AdjustmentMode, StockAdjustment, StockMovement

DEFAULT_REASON = "manual_adjustment"


@dataclass(frozen=True)
class AdjustmentResult:
    new_quantity: int
    movement: StockMovement
    clamped: bool = False


def apply_adjustment(
    current_quantity: int,
    adjustment: StockAdjustment,
    reason: str | None = None,
) -> AdjustmentResult:
    """Compute the stock level after *adjustment*.

    A decrease below zero is clamped at zero; the movement then reports
    the clamped delta, not the requested one.
    """
    if isinstance(current_quantity, bool) or not isinstance(current_quantity, int):
        raise InvalidAdjustment(
            f"Current quantity must be an integer, got {current_quantity!r}"
        )
    if current_quantity < 0:
        raise InvalidAdjustment(
            f"Current quantity cannot be negative, got {current_quantity}"
        )

    clamped = False
    if adjustment.mode is AdjustmentMode.SET:
        new_quantity = adjustment.value
    elif adjustment.mode is AdjustmentMode.INCREASE:
        new_quantity = current_quantity + adjustment.value
    else:
        new_quantity = current_quantity - adjustment.value
        if new_quantity < 0:
            new_quantity = 0
            clamped = True

    movement = StockMovement(
        old_quantity=current_quantity,
        new_quantity=new_quantity,
        reason=reason or DEFAULT_REASON,
    )
    return AdjustmentResult(new_quantity=new_quantity, movement=movement, clamped=clamped)
