"""Shared helpers for building sales documents from user input."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from ims.application.dto import LineItemSpec
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.document import document_number
from ims.domain.model.pricing import LineItem
from ims.domain.repository.product_repository import ProductRepository


def build_line_items(
    specs: list[LineItemSpec], product_repo: ProductRepository
) -> list[LineItem]:
    """Resolve specs to line items, snapshotting current catalog prices."""
    items: list[LineItem] = []
    for index, spec in enumerate(specs, start=1):
        if spec.custom:
            if spec.unit_price is None:
                raise ValidationError(
                    f"Custom item '{spec.product_name}' needs a unit price"
                )
            items.append(
                LineItem.of(str(index), spec.product_name, spec.quantity, spec.unit_price)
            )
            continue

        product = product_repo.get_by_name(spec.product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")

        items.append(
            LineItem.of(
                id=str(index),
                description=product.name,
                quantity=spec.quantity,
                unit_price=spec.unit_price if spec.unit_price is not None else product.price,
                product_id=product.id,
            )
        )
    return items


def next_number(prefix: str, created: Iterable[datetime], now: datetime | None = None) -> str:
    """Next ``PREFIX-YYYY-NNN`` number, counting documents created this year."""
    now = now or datetime.now(timezone.utc)
    this_year = sum(1 for ts in created if ts.year == now.year)
    return document_number(prefix, now.year, this_year + 1)
