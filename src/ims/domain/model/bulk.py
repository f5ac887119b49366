"""Bulk product operations and their per-item report.

Each operation kind carries its own validated parameters; callers build
them through ``parse_bulk_operation`` at the boundary instead of passing
loose option dictionaries around.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Union

from ims.domain.exceptions import ValidationError
from ims.domain.model.notification import Notification
from ims.domain.model.stock import StockAdjustment
from ims.domain.model.value_objects import Money, to_decimal


class BulkOperationKind(Enum):
    UPDATE_PRICE = "update_price"
    UPDATE_CATEGORY = "update_category"
    UPDATE_STOCK = "update_stock"
    UPDATE_MIN_STOCK = "update_min_stock"
    EXPORT = "export"
    DELETE = "delete"


class PriceChangeMode(Enum):
    INCREASE_PERCENT = "increase_percent"
    DECREASE_PERCENT = "decrease_percent"
    INCREASE_AMOUNT = "increase_amount"
    DECREASE_AMOUNT = "decrease_amount"
    SET_PRICE = "set_price"


class ExportFormat(Enum):
    JSON = "json"
    CSV = "csv"


_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class UpdatePrice:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.UPDATE_PRICE

    mode: PriceChangeMode
    value: Decimal

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError(f"Price change value cannot be negative, got {self.value}")

    def apply(self, price: Money) -> Money:
        """New price, rounded to cents and never below zero."""
        current = price.amount
        if self.mode is PriceChangeMode.INCREASE_PERCENT:
            result = current * (1 + self.value / _HUNDRED)
        elif self.mode is PriceChangeMode.DECREASE_PERCENT:
            result = current * (1 - self.value / _HUNDRED)
        elif self.mode is PriceChangeMode.INCREASE_AMOUNT:
            result = current + self.value
        elif self.mode is PriceChangeMode.DECREASE_AMOUNT:
            result = current - self.value
        else:
            result = self.value
        return Money.clamped(result, price.currency).rounded()


@dataclass(frozen=True)
class UpdateCategory:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.UPDATE_CATEGORY

    category: str

    def __post_init__(self) -> None:
        if not self.category or not self.category.strip():
            raise ValidationError("Category is required")


@dataclass(frozen=True)
class UpdateStock:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.UPDATE_STOCK

    adjustment: StockAdjustment
    reason: str = "bulk_update"


@dataclass(frozen=True)
class UpdateMinStock:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.UPDATE_MIN_STOCK

    level: int

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValidationError(f"Minimum stock level must be an integer, got {self.level!r}")
        if self.level < 0:
            raise ValidationError(f"Minimum stock level cannot be negative, got {self.level}")


@dataclass(frozen=True)
class ExportProducts:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.EXPORT

    format: ExportFormat = ExportFormat.CSV


@dataclass(frozen=True)
class DeleteProducts:
    kind: ClassVar[BulkOperationKind] = BulkOperationKind.DELETE


BulkOperation = Union[
    UpdatePrice, UpdateCategory, UpdateStock, UpdateMinStock, ExportProducts, DeleteProducts
]


def _require(params: Mapping[str, Any], key: str, kind: BulkOperationKind) -> Any:
    value = params.get(key)
    if value is None or value == "":
        raise ValidationError(f"'{key}' is required for {kind.value}")
    return value


def parse_bulk_operation(kind: str | BulkOperationKind, params: Mapping[str, Any] | None = None) -> BulkOperation:
    """Validate raw operation parameters into a typed operation.

    Expected parameters per kind:
      update_price     -- ``mode`` (a PriceChangeMode value), ``value``
      update_category  -- ``category``
      update_stock     -- ``mode`` (set/increase/decrease or add/subtract),
                          ``quantity``, optional ``reason``
      update_min_stock -- ``level`` (a whole number, zero or more)
      export           -- optional ``format`` (json or csv, default csv)
      delete           -- nothing
    """
    params = params or {}
    if isinstance(kind, str):
        try:
            kind = BulkOperationKind(kind.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown bulk operation: {kind!r}") from None

    if kind is BulkOperationKind.UPDATE_PRICE:
        raw_mode = _require(params, "mode", kind)
        try:
            mode = PriceChangeMode(str(raw_mode).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown price change mode: {raw_mode!r}") from None
        return UpdatePrice(mode=mode, value=to_decimal(_require(params, "value", kind)))

    if kind is BulkOperationKind.UPDATE_CATEGORY:
        return UpdateCategory(category=str(_require(params, "category", kind)).strip())

    if kind is BulkOperationKind.UPDATE_STOCK:
        adjustment = StockAdjustment.of(
            _require(params, "mode", kind), _require(params, "quantity", kind)
        )
        return UpdateStock(adjustment=adjustment, reason=params.get("reason") or "bulk_update")

    if kind is BulkOperationKind.UPDATE_MIN_STOCK:
        raw_level = _require(params, "level", kind)
        try:
            level = int(str(raw_level).strip())
        except ValueError:
            raise ValidationError(f"Minimum stock level must be a whole number, got {raw_level!r}") from None
        return UpdateMinStock(level=level)

    if kind is BulkOperationKind.EXPORT:
        raw_format = params.get("format") or ExportFormat.CSV.value
        try:
            export_format = ExportFormat(str(raw_format).strip().lower())
        except ValueError:
            raise ValidationError(f"Unsupported export format: {raw_format!r}") from None
        return ExportProducts(format=export_format)

    return DeleteProducts()


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BulkItemResult:
    product_id: str
    success: bool
    new_value: Any = None
    error: str | None = None


@dataclass(frozen=True)
class BulkOperationReport:
    """Outcome of one bulk run, one entry per distinct requested id.

    The run is not transactional: inspect every entry rather than
    assuming all-or-nothing.
    """

    kind: BulkOperationKind
    results: list[BulkItemResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[BulkItemResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[BulkItemResult]:
        return [r for r in self.results if not r.success]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def exported_rows(self) -> list[dict[str, Any]]:
        return [r.new_value for r in self.succeeded if self.kind is BulkOperationKind.EXPORT]

    @property
    def notification(self) -> Notification:
        label = self.kind.value.replace("_", " ")
        ok, bad = len(self.succeeded), len(self.failed)
        if not bad:
            return Notification.success(f"Bulk {label} applied to {ok} products")
        if not ok:
            return Notification.error(f"Bulk {label} failed for all {bad} products")
        return Notification.warning(
            f"Bulk {label} applied to {ok} products, {bad} failed"
        )
