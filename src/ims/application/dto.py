"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.document import Invoice, Quotation, SalesOrder


@dataclass(frozen=True)
class LineItemSpec:
    """Input: a catalog product (by name) and a quantity.

    ``unit_price`` overrides the catalog price; it is required for
    custom items, which are written with ``custom=True``.
    """

    product_name: str
    quantity: int
    unit_price: str | None = None
    custom: bool = False


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    description: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str
    allocated: bool = False


@dataclass(frozen=True)
class DocumentDTO:
    """Output: a quotation, order or invoice as displayed to the user."""

    id: int | None
    number: str
    customer_name: str
    status: str
    items: list[LineItemDTO]
    subtotal: str
    discount: str
    discount_amount: str
    tax_rate: str
    tax: str
    total: str
    created_at: str
    payment_status: str | None = None
    amount_paid: str | None = None
    reference: str | None = None


def document_to_dto(document: Quotation | SalesOrder | Invoice) -> DocumentDTO:
    totals = document.totals
    payment_status = amount_paid = reference = None
    created = getattr(document, "created_at", None) or getattr(document, "issued_at")

    if isinstance(document, SalesOrder):
        payment_status = document.payment_status.value
        amount_paid = str(document.amount_paid)
        reference = document.quotation_number
    elif isinstance(document, Quotation):
        reference = document.converted_order_number
    else:
        reference = document.order_number

    return DocumentDTO(
        id=getattr(document, "id", None),
        number=document.number,
        customer_name=document.customer_name,
        status=document.status.value,
        items=[
            LineItemDTO(
                description=item.description,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
                allocated=item.inventory_allocated,
            )
            for item in document.items
        ],
        subtotal=str(totals.subtotal),
        discount=str(document.discount),
        discount_amount=str(totals.discount_amount),
        tax_rate=str(document.tax_rate),
        tax=str(totals.tax),
        total=str(totals.total),
        created_at=created.strftime("%Y-%m-%d %H:%M UTC"),
        payment_status=payment_status,
        amount_paid=amount_paid,
        reference=reference,
    )
