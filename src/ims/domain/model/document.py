"""Sales document aggregates: Quotation, SalesOrder and Invoice.

Each document is an aggregate root that exclusively owns its line items.
A quotation converts into exactly one sales order and an order can be
billed as an invoice; in both cases line items are copied by value, so
the documents share nothing afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from ims.domain.exceptions import ValidationError
from ims.domain.model.pricing import Discount, LineItem
from ims.domain.model.value_objects import Money, Percentage
from ims.domain.service.document_calculator import DocumentTotals, calculate_totals

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DEFAULT_TAX_RATE = Percentage(Decimal("10"))
MAX_LINE_ITEMS = 50

QUOTATION_PREFIX = "QUO"
ORDER_PREFIX = "SO"
INVOICE_PREFIX = "INV"


def document_number(prefix: str, year: int, sequence: int) -> str:
    """Format a document number such as ``QUO-2024-007``."""
    if sequence <= 0:
        raise ValidationError("Document sequence must be positive")
    return f"{prefix}-{year}-{sequence:03d}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _validate_header(customer_name: str, items: list[LineItem]) -> None:
    if not customer_name or not customer_name.strip():
        raise ValidationError("Customer name is required")
    if not items:
        raise ValidationError("Document must contain at least one item")
    if len(items) > MAX_LINE_ITEMS:
        raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per document")


@dataclass
class _Priced:
    """Mixin: totals recomputed from items, tax rate and discount."""

    items: list[LineItem]
    tax_rate: Percentage
    discount: Discount

    @property
    def totals(self) -> DocumentTotals:
        return calculate_totals(self.items, self.tax_rate, self.discount)

    @property
    def total(self) -> Money:
        return self.totals.total


# ---------------------------------------------------------------------------
# Quotation
# ---------------------------------------------------------------------------


class QuotationStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


@dataclass
class Quotation(_Priced):
    """Aggregate root for quotations.

    Use ``Quotation.create()`` for new quotations; the plain constructor
    lets repositories reconstitute persisted ones without re-validating.
    """

    id: int | None = None
    number: str = ""
    customer_name: str = ""
    status: QuotationStatus = QuotationStatus.DRAFT
    created_at: datetime = field(default_factory=_now)
    sent_at: datetime | None = None
    accepted_at: datetime | None = None
    converted_order_number: str | None = None

    @staticmethod
    def create(
        number: str,
        customer_name: str,
        items: list[LineItem],
        tax_rate: Percentage = DEFAULT_TAX_RATE,
        discount: Discount | None = None,
    ) -> Quotation:
        _validate_header(customer_name, items)
        return Quotation(
            items=list(items),
            tax_rate=tax_rate,
            discount=discount or Discount.none(),
            number=number,
            customer_name=customer_name.strip(),
        )

    # --- State transitions ----------------------------------------------------

    def send(self) -> None:
        """Transition DRAFT -> SENT."""
        self._require(QuotationStatus.DRAFT, action="send")
        self.status = QuotationStatus.SENT
        self.sent_at = _now()

    def accept(self) -> None:
        """Transition DRAFT|SENT -> ACCEPTED."""
        self._require(QuotationStatus.DRAFT, QuotationStatus.SENT, action="accept")
        self.status = QuotationStatus.ACCEPTED
        self.accepted_at = _now()

    def reject(self) -> None:
        """Transition SENT -> REJECTED."""
        self._require(QuotationStatus.SENT, action="reject")
        self.status = QuotationStatus.REJECTED

    def expire(self) -> None:
        """Transition DRAFT|SENT -> EXPIRED."""
        self._require(QuotationStatus.DRAFT, QuotationStatus.SENT, action="expire")
        self.status = QuotationStatus.EXPIRED

    def convert_to_order(self, order_number: str) -> SalesOrder:
        """Create the one sales order this quotation turns into.

        The quotation is marked ACCEPTED (if it was not already) and
        remembers the order number so it cannot be converted twice.
        """
        if self.converted_order_number is not None:
            raise ValidationError(
                f"Quotation {self.number} was already converted to "
                f"order {self.converted_order_number}"
            )
        if self.status in (QuotationStatus.REJECTED, QuotationStatus.EXPIRED):
            raise ValidationError(
                f"Cannot convert quotation in {self.status.value} status"
            )

        order = SalesOrder(
            items=[item.copy() for item in self.items],
            tax_rate=self.tax_rate,
            discount=self.discount,
            number=order_number,
            customer_name=self.customer_name,
            quotation_number=self.number,
            notes=f"Converted from quotation {self.number}",
        )

        if self.status is not QuotationStatus.ACCEPTED:
            self.accept()
        self.converted_order_number = order_number
        return order

    # --- Internal helpers -----------------------------------------------------

    def _require(self, *allowed: QuotationStatus, action: str) -> None:
        if self.status not in allowed:
            raise ValidationError(
                f"Cannot {action} quotation — current status is {self.status.value}"
            )


# ---------------------------------------------------------------------------
# Sales order
# ---------------------------------------------------------------------------


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


_ORDER_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


@dataclass(frozen=True)
class Payment:
    amount: Money
    recorded_at: datetime = field(default_factory=_now)


@dataclass
class SalesOrder(_Priced):
    """Aggregate root for sales orders."""

    id: int | None = None
    number: str = ""
    customer_name: str = ""
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    quotation_number: str | None = None
    notes: str = ""
    payments: list[Payment] = field(default_factory=list)
    shipped_at: datetime | None = None
    delivered_at: datetime | None = None

    @staticmethod
    def create(
        number: str,
        customer_name: str,
        items: list[LineItem],
        tax_rate: Percentage = DEFAULT_TAX_RATE,
        discount: Discount | None = None,
    ) -> SalesOrder:
        _validate_header(customer_name, items)
        return SalesOrder(
            items=list(items),
            tax_rate=tax_rate,
            discount=discount or Discount.none(),
            number=number,
            customer_name=customer_name.strip(),
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        self._transition(OrderStatus.CONFIRMED)

    def start_processing(self) -> None:
        self._transition(OrderStatus.PROCESSING)

    def ship(self) -> None:
        self._transition(OrderStatus.SHIPPED)
        self.shipped_at = _now()

    def deliver(self) -> None:
        self._transition(OrderStatus.DELIVERED)
        self.delivered_at = _now()

    def ensure_cancellable(self) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if OrderStatus.CANCELLED not in _ORDER_TRANSITIONS[self.status]:
            raise ValidationError(f"Cannot cancel order in {self.status.value} status")

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED|PROCESSING -> CANCELLED.

        Allocated stock must be released *before* calling this
        (coordinated by the application handler via the domain service).
        """
        self.ensure_cancellable()
        self.status = OrderStatus.CANCELLED

    # --- Payments -------------------------------------------------------------

    def record_payment(self, amount: Money) -> None:
        if amount.is_zero:
            raise ValidationError("Payment amount must be greater than zero")
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Cannot record a payment on a cancelled order")
        self.payments.append(Payment(amount=amount))

    @property
    def amount_paid(self) -> Money:
        paid = Money.zero()
        for payment in self.payments:
            paid = paid + payment.amount
        return paid

    @property
    def payment_status(self) -> PaymentStatus:
        paid = self.amount_paid
        if paid >= self.total:
            return PaymentStatus.PAID
        if not paid.is_zero:
            return PaymentStatus.PARTIAL
        return PaymentStatus.PENDING

    @property
    def is_fully_allocated(self) -> bool:
        stocked = [item for item in self.items if not item.is_custom]
        return all(item.inventory_allocated for item in stocked)

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, target: OrderStatus) -> None:
        if target not in _ORDER_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {target.value}"
            )
        self.status = target


# ---------------------------------------------------------------------------
# Invoice
# ---------------------------------------------------------------------------


class InvoiceStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


@dataclass
class Invoice(_Priced):
    number: str = ""
    customer_name: str = ""
    order_number: str | None = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    issued_at: datetime = field(default_factory=_now)

    @staticmethod
    def from_order(order: SalesOrder, number: str) -> Invoice:
        if order.status == OrderStatus.CANCELLED:
            raise ValidationError("Cannot invoice a cancelled order")
        return Invoice(
            items=[item.copy() for item in order.items],
            tax_rate=order.tax_rate,
            discount=order.discount,
            number=number,
            customer_name=order.customer_name,
            order_number=order.number,
            status=(
                InvoiceStatus.PAID
                if order.payment_status is PaymentStatus.PAID
                else InvoiceStatus.DRAFT
            ),
        )

    def send(self) -> None:
        if self.status != InvoiceStatus.DRAFT:
            raise ValidationError(
                f"Cannot send invoice — current status is {self.status.value}"
            )
        self.status = InvoiceStatus.SENT

    def mark_paid(self) -> None:
        if self.status == InvoiceStatus.PAID:
            raise ValidationError("Invoice is already paid")
        self.status = InvoiceStatus.PAID

    def mark_overdue(self) -> None:
        if self.status != InvoiceStatus.SENT:
            raise ValidationError("Only sent invoices can become overdue")
        self.status = InvoiceStatus.OVERDUE
