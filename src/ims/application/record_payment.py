"""Application service: Record Payment use case."""

from __future__ import annotations

import logging

from ims.application.dto import DocumentDTO, document_to_dto
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.value_objects import Money
from ims.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RecordPaymentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, amount: str) -> DocumentDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.record_payment(Money.of(amount))
        self._order_repo.save(order)
        logger.info(
            "Payment of %s recorded on order %s (%s)",
            amount, order.number, order.payment_status.value,
        )
        return document_to_dto(order)
