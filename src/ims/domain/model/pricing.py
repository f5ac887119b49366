"""Line items and discounts shared by quotations, orders and invoices."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from ims.domain.exceptions import InvalidDiscount, ValidationError
from ims.domain.model.value_objects import Money, Quantity, to_decimal


@dataclass
class LineItem:
    """One entry on a sales document.

    ``line_total`` is computed on every read, so it can never drift from
    ``quantity`` and ``unit_price``. ``product_id`` is None for custom
    (non-catalog) items.
    """

    id: str
    description: str
    quantity: Quantity
    unit_price: Money
    product_id: str | None = None
    inventory_allocated: bool = False

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def is_custom(self) -> bool:
        return self.product_id is None

    def update_quantity(self, quantity: int) -> None:
        self.quantity = Quantity(quantity)

    def copy(self) -> LineItem:
        """An independent copy, used when one document spawns another."""
        return replace(self, inventory_allocated=False)

    @staticmethod
    def of(
        id: str,
        description: str,
        quantity: int,
        unit_price: str | int | Decimal | Money,
        product_id: str | None = None,
    ) -> LineItem:
        if not description or not description.strip():
            raise ValidationError("Line item description is required")
        price = unit_price if isinstance(unit_price, Money) else Money.of(unit_price)
        return LineItem(
            id=id,
            description=description.strip(),
            quantity=Quantity(quantity),
            unit_price=price,
            product_id=product_id,
        )


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Discount:
    type: DiscountType
    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.type, DiscountType):
            raise InvalidDiscount(f"Unknown discount type: {self.type!r}")
        if not isinstance(self.value, Decimal):
            raise InvalidDiscount(
                f"Discount value must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidDiscount(f"Discount cannot be negative, got {self.value}")

    def amount_for(self, subtotal: Money) -> Money:
        if self.type is DiscountType.PERCENTAGE:
            return Money(subtotal.amount * self.value / Decimal("100"), subtotal.currency)
        return Money(self.value, subtotal.currency)

    def __str__(self) -> str:
        if self.type is DiscountType.PERCENTAGE:
            return f"{self.value.normalize():f}%"
        return f"${self.value:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def none() -> Discount:
        return Discount(DiscountType.FIXED, Decimal("0"))

    @staticmethod
    def of(type: str | DiscountType, value: str | int | float | Decimal) -> Discount:
        if isinstance(type, str):
            try:
                type = DiscountType(type.strip().lower())
            except ValueError:
                raise InvalidDiscount(f"Unknown discount type: {type!r}") from None
        try:
            amount = to_decimal(value)
        except ValidationError as exc:
            raise InvalidDiscount(str(exc)) from exc
        return Discount(type, amount)

    @staticmethod
    def parse(raw: str) -> Discount:
        """Parse ``'10%'`` as a percentage and ``'25.00'`` as a fixed amount."""
        raw = raw.strip()
        if raw.endswith("%"):
            return Discount.of(DiscountType.PERCENTAGE, raw[:-1])
        return Discount.of(DiscountType.FIXED, raw)
