"""Unit tests for Quotation, SalesOrder and Invoice aggregates."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.document import (
    MAX_LINE_ITEMS,
    Invoice,
    InvoiceStatus,
    OrderStatus,
    PaymentStatus,
    Quotation,
    QuotationStatus,
    SalesOrder,
    document_number,
)
from ims.domain.model.pricing import Discount, LineItem
from ims.domain.model.value_objects import Money, Percentage


def _items() -> list[LineItem]:
    return [
        LineItem.of("1", "Widget", 2, "10.00", product_id="1"),
        LineItem.of("2", "Setup fee", 1, "5.00"),
    ]


def _quotation() -> Quotation:
    return Quotation.create("QUO-2024-001", "Alice", _items())


def _order() -> SalesOrder:
    return SalesOrder.create("SO-2024-001", "Alice", _items())


class TestDocumentNumber:

    def test_zero_padded(self):
        assert document_number("QUO", 2024, 7) == "QUO-2024-007"
        assert document_number("SO", 2024, 1234) == "SO-2024-1234"

    def test_sequence_must_be_positive(self):
        with pytest.raises(ValidationError):
            document_number("INV", 2024, 0)


class TestQuotationCreation:

    def test_defaults(self):
        q = _quotation()
        assert q.status is QuotationStatus.DRAFT
        assert q.tax_rate == Percentage(Decimal("10"))
        assert q.total == Money.of("27.50")

    def test_customer_required(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Quotation.create("QUO-2024-001", "  ", _items())

    def test_items_required(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Quotation.create("QUO-2024-001", "Alice", [])

    def test_item_limit(self):
        items = [LineItem.of(str(i), "Bolt", 1, "1.00") for i in range(MAX_LINE_ITEMS + 1)]
        with pytest.raises(ValidationError, match="Maximum"):
            Quotation.create("QUO-2024-001", "Alice", items)


class TestQuotationLifecycle:

    def test_send_then_accept(self):
        q = _quotation()
        q.send()
        q.accept()
        assert q.status is QuotationStatus.ACCEPTED
        assert q.sent_at is not None and q.accepted_at is not None

    def test_cannot_send_twice(self):
        q = _quotation()
        q.send()
        with pytest.raises(ValidationError, match="Cannot send"):
            q.send()

    def test_draft_cannot_be_rejected(self):
        with pytest.raises(ValidationError, match="Cannot reject"):
            _quotation().reject()


class TestQuotationConversion:

    def test_conversion_copies_items_and_accepts(self):
        q = _quotation()
        order = q.convert_to_order("SO-2024-001")

        assert q.status is QuotationStatus.ACCEPTED
        assert q.converted_order_number == "SO-2024-001"
        assert order.quotation_number == q.number
        assert order.status is OrderStatus.PENDING
        assert order.total == q.total

    def test_converted_items_are_independent(self):
        q = _quotation()
        order = q.convert_to_order("SO-2024-001")

        order.items[0].update_quantity(9)

        assert q.items[0].quantity.value == 2
        assert order.items[0] is not q.items[0]

    def test_converts_only_once(self):
        q = _quotation()
        q.convert_to_order("SO-2024-001")
        with pytest.raises(ValidationError, match="already converted"):
            q.convert_to_order("SO-2024-002")

    def test_rejected_quotation_cannot_convert(self):
        q = _quotation()
        q.send()
        q.reject()
        with pytest.raises(ValidationError, match="rejected"):
            q.convert_to_order("SO-2024-001")


class TestSalesOrderLifecycle:

    def test_happy_path(self):
        order = _order()
        order.confirm()
        order.start_processing()
        order.ship()
        order.deliver()
        assert order.status is OrderStatus.DELIVERED
        assert order.shipped_at is not None and order.delivered_at is not None

    def test_cannot_skip_states(self):
        with pytest.raises(ValidationError, match="from pending to shipped"):
            _order().ship()

    def test_cancel_from_processing(self):
        order = _order()
        order.confirm()
        order.start_processing()
        order.cancel()
        assert order.status is OrderStatus.CANCELLED

    def test_shipped_order_cannot_be_cancelled(self):
        order = _order()
        order.confirm()
        order.start_processing()
        order.ship()
        with pytest.raises(ValidationError, match="Cannot cancel"):
            order.cancel()

    def test_cancel_twice_rejected(self):
        order = _order()
        order.cancel()
        with pytest.raises(ValidationError, match="already cancelled"):
            order.cancel()

    def test_fully_allocated_ignores_custom_lines(self):
        order = _order()
        assert not order.is_fully_allocated
        order.items[0].inventory_allocated = True
        assert order.is_fully_allocated


class TestPayments:

    def test_payment_status_progression(self):
        order = _order()  # total $27.50
        assert order.payment_status is PaymentStatus.PENDING

        order.record_payment(Money.of("10.00"))
        assert order.payment_status is PaymentStatus.PARTIAL

        order.record_payment(Money.of("17.50"))
        assert order.payment_status is PaymentStatus.PAID
        assert order.amount_paid == Money.of("27.50")

    def test_zero_payment_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _order().record_payment(Money.zero())

    def test_cancelled_order_takes_no_payments(self):
        order = _order()
        order.cancel()
        with pytest.raises(ValidationError, match="cancelled"):
            order.record_payment(Money.of("1.00"))


class TestInvoice:

    def test_from_order_copies_totals(self):
        order = SalesOrder.create(
            "SO-2024-003", "Bob", _items(), discount=Discount.parse("5.00")
        )
        invoice = Invoice.from_order(order, "INV-2024-003")

        assert invoice.order_number == "SO-2024-003"
        assert invoice.status is InvoiceStatus.DRAFT
        assert invoice.total == order.total == Money.of("22.00")

    def test_paid_order_gives_paid_invoice(self):
        order = _order()
        order.record_payment(Money.of("30.00"))
        assert Invoice.from_order(order, "INV-2024-001").status is InvoiceStatus.PAID

    def test_cancelled_order_cannot_be_invoiced(self):
        order = _order()
        order.cancel()
        with pytest.raises(ValidationError, match="cancelled"):
            Invoice.from_order(order, "INV-2024-001")

    def test_lifecycle(self):
        invoice = Invoice.from_order(_order(), "INV-2024-001")
        invoice.send()
        invoice.mark_overdue()
        invoice.mark_paid()
        assert invoice.status is InvoiceStatus.PAID

    def test_draft_cannot_become_overdue(self):
        invoice = Invoice.from_order(_order(), "INV-2024-001")
        with pytest.raises(ValidationError, match="Only sent invoices"):
            invoice.mark_overdue()
