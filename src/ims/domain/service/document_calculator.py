"""Domain service: totals for invoices, quotations and orders.

Totals are always recomputed from the full set of line items; there is
no incremental or cached arithmetic to drift out of sync.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ims.domain.model.pricing import Discount, LineItem
from ims.domain.model.value_objects import Money, Percentage


@dataclass(frozen=True)
class DocumentTotals:
    subtotal: Money
    discount_amount: Money
    taxable_base: Money
    tax: Money
    total: Money


def calculate_totals(
    items: Iterable[LineItem],
    tax_rate: Percentage,
    discount: Discount | None = None,
) -> DocumentTotals:
    """Compute subtotal, discount, taxable base, tax and grand total.

    A discount larger than the subtotal floors the taxable base at zero
    before tax is applied, so tax and total are never negative.
    """
    discount = discount or Discount.none()

    subtotal = Money.zero()
    for item in items:
        subtotal = subtotal + item.line_total

    discount_amount = discount.amount_for(subtotal).rounded()
    taxable_base = Money.clamped(subtotal.amount - discount_amount.amount)
    tax = Money(tax_rate.of(taxable_base.amount)).rounded()
    total = Money.clamped(taxable_base.amount + tax.amount)

    return DocumentTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_base=taxable_base,
        tax=tax,
        total=total,
    )
