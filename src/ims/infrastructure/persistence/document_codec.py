"""JSON encoding shared by the quotation and order repositories."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from ims.domain.model.pricing import Discount, DiscountType, LineItem
from ims.domain.model.value_objects import Money, Percentage, Quantity


def items_to_raw(items: list[LineItem]) -> list[dict]:
    return [
        {
            "id": item.id,
            "product_id": item.product_id,
            "description": item.description,
            "quantity": item.quantity.value,
            "unit_price": str(item.unit_price.amount),
            "currency": item.unit_price.currency,
            "inventory_allocated": item.inventory_allocated,
        }
        for item in items
    ]


def items_from_raw(raw: list[dict]) -> list[LineItem]:
    return [
        LineItem(
            id=i["id"],
            description=i["description"],
            quantity=Quantity(i["quantity"]),
            unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            product_id=i.get("product_id"),
            inventory_allocated=i.get("inventory_allocated", False),
        )
        for i in raw
    ]


def pricing_to_raw(tax_rate: Percentage, discount: Discount) -> dict:
    return {
        "tax_rate": str(tax_rate.value),
        "discount_type": discount.type.value,
        "discount_value": str(discount.value),
    }


def tax_rate_from_raw(raw: dict) -> Percentage:
    return Percentage(Decimal(raw.get("tax_rate", "0")))


def discount_from_raw(raw: dict) -> Discount:
    return Discount(
        DiscountType(raw.get("discount_type", DiscountType.FIXED.value)),
        Decimal(raw.get("discount_value", "0")),
    )


def dt_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def dt_from_raw(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
