"""Stock value objects: statuses, alerts, reorder suggestions, movements.

Everything here is derived from Product state and recomputed on read;
only ``StockMovement`` is ever written anywhere (to the activity log).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ims.domain.exceptions import InvalidAdjustment
from ims.domain.model.value_objects import Money


class StockStatus(Enum):
    INACTIVE = "inactive"
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    NORMAL = "normal"


class AlertSeverity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """0 for the most urgent severity."""
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER = [
    AlertSeverity.CRITICAL,
    AlertSeverity.HIGH,
    AlertSeverity.MEDIUM,
    AlertSeverity.LOW,
]


class ReorderPriority(Enum):
    CRITICAL = "critical"
    HIGH = "high"


@dataclass(frozen=True)
class StockAlert:
    product_id: str
    product_name: str
    severity: AlertSeverity
    message: str
    current_quantity: int
    min_level: int


@dataclass(frozen=True)
class ReorderSuggestion:
    product_id: str
    product_name: str
    current_quantity: int
    min_level: int
    suggested_quantity: int
    reorder_cost: Money
    priority: ReorderPriority

    @property
    def unit_cost(self) -> Money:
        return Money(self.reorder_cost.amount / self.suggested_quantity).rounded()


class AdjustmentMode(Enum):
    SET = "set"
    INCREASE = "increase"
    DECREASE = "decrease"


# Bulk stock toolbar vocabulary
_MODE_ALIASES = {
    "add": AdjustmentMode.INCREASE,
    "subtract": AdjustmentMode.DECREASE,
}


@dataclass(frozen=True)
class StockAdjustment:
    """A validated request to change a stock level.

    Build it with ``StockAdjustment.of()`` at the boundary; the
    constructor re-checks the value so an invalid adjustment can never
    reach the engine.
    """

    mode: AdjustmentMode
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.mode, AdjustmentMode):
            raise InvalidAdjustment(f"Unknown adjustment mode: {self.mode!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAdjustment(
                f"Adjustment value must be an integer, got {self.value!r}"
            )
        if self.value < 0:
            raise InvalidAdjustment(
                f"Adjustment value cannot be negative, got {self.value}"
            )

    @staticmethod
    def of(mode: str | AdjustmentMode, value: object) -> StockAdjustment:
        if isinstance(mode, str):
            key = mode.strip().lower()
            if key in _MODE_ALIASES:
                mode = _MODE_ALIASES[key]
            else:
                try:
                    mode = AdjustmentMode(key)
                except ValueError:
                    raise InvalidAdjustment(f"Unknown adjustment mode: {mode!r}") from None
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise InvalidAdjustment(
                    f"Adjustment value must be an integer, got {value!r}"
                ) from None
        return StockAdjustment(mode=mode, value=value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class StockMovement:
    """Audit record of one stock change.

    ``delta`` is the change actually applied, which differs from the
    requested value when a decrease is clamped at zero.
    """

    old_quantity: int
    new_quantity: int
    reason: str = ""
    product_id: str | None = None

    def for_product(self, product_id: str) -> StockMovement:
        return replace(self, product_id=product_id)

    @property
    def delta(self) -> int:
        return self.new_quantity - self.old_quantity

    def describe(self, product_name: str) -> str:
        sign = "+" if self.delta >= 0 else ""
        return (
            f"{product_name}: {self.old_quantity} → {self.new_quantity} "
            f"({sign}{self.delta})"
        )
