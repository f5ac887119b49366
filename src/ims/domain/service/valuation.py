"""Domain service: inventory valuation.

Folds a product collection into totals, a per-category breakdown and
status counts. ``total_value`` covers every product, active or not;
``active_value`` is the same sum restricted to active products.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from ims.domain.model.product import DEFAULT_CATEGORY, Product
from ims.domain.model.stock import StockStatus
from ims.domain.model.value_objects import Money
from ims.domain.service.stock_classifier import product_status

logger = logging.getLogger(__name__)

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class CategoryBreakdown:
    category: str
    count: int
    value: Money
    percentage: Decimal

    @property
    def label(self) -> str:
        """Display label: first letter capitalised."""
        return self.category[:1].upper() + self.category[1:]


@dataclass(frozen=True)
class InventoryValuation:
    total_products: int
    active_products: int
    total_value: Money
    active_value: Money
    total_units: int
    categories: list[CategoryBreakdown] = field(default_factory=list)
    status_counts: dict[StockStatus, int] = field(default_factory=dict)

    @property
    def low_stock_items(self) -> int:
        return self.status_counts.get(StockStatus.LOW_STOCK, 0)

    @property
    def out_of_stock_items(self) -> int:
        return self.status_counts.get(StockStatus.OUT_OF_STOCK, 0)

    @property
    def average_stock_level(self) -> Decimal:
        if not self.total_products:
            return Decimal("0")
        return Decimal(self.total_units) / Decimal(self.total_products)


def category_percentage(count: int, total: int) -> Decimal:
    """``count / total * 100`` rounded to one decimal place."""
    raw = Decimal(count * 100) / Decimal(total)
    return raw.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def value_inventory(products: Iterable[Product]) -> InventoryValuation:
    counts: dict[str, int] = {}
    values: dict[str, Money] = {}
    status_counts = {status: 0 for status in StockStatus}
    total_value = Money.zero()
    active_value = Money.zero()
    total_products = active_products = total_units = 0

    for product in products:
        category = product.category or DEFAULT_CATEGORY
        value = product.inventory_value

        total_products += 1
        total_units += product.stock_quantity
        total_value = total_value + value
        if product.is_active:
            active_products += 1
            active_value = active_value + value

        counts[category] = counts.get(category, 0) + 1
        values[category] = values.get(category, Money.zero()) + value
        status_counts[product_status(product)] += 1

    categories = [
        CategoryBreakdown(
            category=category,
            count=count,
            value=values[category],
            percentage=category_percentage(count, total_products),
        )
        for category, count in counts.items()
    ]

    logger.debug(
        "Valued %d products across %d categories: %s",
        total_products, len(categories), total_value,
    )
    return InventoryValuation(
        total_products=total_products,
        active_products=active_products,
        total_value=total_value,
        active_value=active_value,
        total_units=total_units,
        categories=categories,
        status_counts=status_counts,
    )
