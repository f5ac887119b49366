"""Application service: Sales order lifecycle transitions."""

from __future__ import annotations

import logging

from ims.application.dto import DocumentDTO, document_to_dto
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

# CLI verb -> SalesOrder method; cancelling goes through CancelOrderHandler.
ACTIONS = {
    "confirm": "confirm",
    "process": "start_processing",
    "ship": "ship",
    "deliver": "deliver",
}


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, action: str) -> DocumentDTO:
        if action not in ACTIONS:
            raise ValidationError(
                f"Unknown order action '{action}'. Expected one of: {', '.join(ACTIONS)}"
            )

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        getattr(order, ACTIONS[action])()
        self._order_repo.save(order)
        logger.info("Order %s -> %s", order.number, order.status.value)
        return document_to_dto(order)
