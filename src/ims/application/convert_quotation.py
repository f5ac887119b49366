"""Application service: Convert Quotation to Sales Order use case.

The quotation aggregate decides whether conversion is allowed and
produces the order; this handler numbers it and persists both sides.
"""

from __future__ import annotations

import logging

from ims.application.dto import DocumentDTO, document_to_dto
from ims.application.line_items import next_number
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.document import ORDER_PREFIX
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.quotation_repository import QuotationRepository

logger = logging.getLogger(__name__)


class ConvertQuotationHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._quotation_repo = quotation_repo
        self._order_repo = order_repo

    def handle(self, quotation_id: int) -> DocumentDTO:
        quotation = self._quotation_repo.get_by_id(quotation_id)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation #{quotation_id} not found")

        number = next_number(ORDER_PREFIX, (o.created_at for o in self._order_repo.list_all()))
        order = quotation.convert_to_order(number)

        self._order_repo.save(order)
        self._quotation_repo.save(quotation)
        logger.info("Converted quotation %s to order %s", quotation.number, order.number)
        return document_to_dto(order)
