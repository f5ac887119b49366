"""Application service: Generate Invoice from Order use case.

Invoices are rendered on demand and not stored; the number is derived
from the order's sequence so re-generating yields the same invoice.
"""

from __future__ import annotations

from ims.application.dto import DocumentDTO, document_to_dto
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.document import INVOICE_PREFIX, ORDER_PREFIX, Invoice
from ims.domain.repository.order_repository import OrderRepository


class GenerateInvoiceHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> DocumentDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        number = order.number.replace(f"{ORDER_PREFIX}-", f"{INVOICE_PREFIX}-", 1)
        invoice = Invoice.from_order(order, number)
        return document_to_dto(invoice)
