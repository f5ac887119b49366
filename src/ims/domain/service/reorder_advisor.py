"""Domain service: reorder suggestions for low-stock products."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.stock import ReorderPriority, ReorderSuggestion
from ims.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

# Never suggest fewer than this many units above the minimum level.
MIN_REORDER_HEADROOM = 10

SORT_KEYS = ("priority", "cost", "name")


def suggested_quantity(min_level: int) -> int:
    return max(min_level * 2, min_level + MIN_REORDER_HEADROOM)


def suggest_reorder(product: Product) -> ReorderSuggestion:
    """Suggest how much of *product* to reorder.

    The caller is expected to have filtered to products at or below
    their minimum level; this function does not re-check.
    """
    quantity = suggested_quantity(product.min_stock_level)
    return ReorderSuggestion(
        product_id=product.id,
        product_name=product.name,
        current_quantity=product.stock_quantity,
        min_level=product.min_stock_level,
        suggested_quantity=quantity,
        reorder_cost=(product.unit_cost * quantity).rounded(),
        priority=(
            ReorderPriority.CRITICAL
            if product.stock_quantity == 0
            else ReorderPriority.HIGH
        ),
    )


def needs_reorder(product: Product) -> bool:
    return product.is_active and product.stock_quantity <= product.min_stock_level


def reorder_suggestions(
    products: Iterable[Product], sort_by: str = "priority"
) -> list[ReorderSuggestion]:
    """Suggestions for every active product at or below its minimum level.

    ``sort_by`` is one of ``priority`` (critical first, then emptiest),
    ``cost`` (most expensive reorder first) or ``name``.
    """
    if sort_by not in SORT_KEYS:
        raise ValidationError(
            f"Unknown sort key '{sort_by}'. Expected one of: {', '.join(SORT_KEYS)}"
        )

    suggestions = [suggest_reorder(p) for p in products if needs_reorder(p)]

    if sort_by == "priority":
        suggestions.sort(
            key=lambda s: (s.priority is not ReorderPriority.CRITICAL, s.current_quantity)
        )
    elif sort_by == "cost":
        suggestions.sort(key=lambda s: s.reorder_cost.amount, reverse=True)
    else:
        suggestions.sort(key=lambda s: s.product_name.lower())

    logger.debug("Generated %d reorder suggestions", len(suggestions))
    return suggestions


def total_reorder_cost(suggestions: Iterable[ReorderSuggestion]) -> Money:
    total = Money.zero()
    for suggestion in suggestions:
        total = total + suggestion.reorder_cost
    return total


def restock_target(product: Product) -> int:
    """Quick-restock level: the minimum plus half of it again, rounded up."""
    return product.min_stock_level + math.ceil(product.min_stock_level * 0.5)
