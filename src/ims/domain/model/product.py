"""Product aggregate.

Products live independently of sales documents. They have their own
lifecycle: prices change, stock is adjusted, products are recategorised
and soft-deactivated via ``is_active``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money

DEFAULT_CATEGORY = "other"


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock_quantity`` is never negative
    - ``min_stock_level`` is never negative
    """

    id: str
    name: str
    price: Money
    sku: str = ""
    category: str = DEFAULT_CATEGORY
    cost: Money | None = None
    stock_quantity: int = 0
    min_stock_level: int = 0
    is_active: bool = True

    def __post_init__(self) -> None:
        _check_count("Stock quantity", self.stock_quantity)
        _check_count("Minimum stock level", self.min_stock_level)
        if not self.category:
            self.category = DEFAULT_CATEGORY

    # --- Computed properties --------------------------------------------------

    @property
    def unit_cost(self) -> Money:
        """Cost per unit for reordering: cost, falling back to price."""
        if self.cost is not None:
            return self.cost
        if self.price is not None:
            return self.price
        return Money.zero()

    @property
    def inventory_value(self) -> Money:
        return self.price * self.stock_quantity

    # --- Mutations ------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing sales documents are unaffected because their line items
        capture a price snapshot.
        """
        self.price = new_price

    def change_category(self, category: str) -> None:
        if not category or not category.strip():
            raise ValidationError("Category is required")
        self.category = category.strip()

    def set_stock_quantity(self, quantity: int) -> None:
        _check_count("Stock quantity", quantity)
        self.stock_quantity = quantity

    def update_min_stock_level(self, level: int) -> None:
        _check_count("Minimum stock level", level)
        self.min_stock_level = level

    def deactivate(self) -> None:
        self.is_active = False

    def activate(self) -> None:
        self.is_active = True


def _check_count(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")
