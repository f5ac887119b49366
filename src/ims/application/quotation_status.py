"""Application service: Quotation lifecycle transitions (send, accept, ...)."""

from __future__ import annotations

import logging

from ims.application.dto import DocumentDTO, document_to_dto
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.repository.quotation_repository import QuotationRepository

logger = logging.getLogger(__name__)

ACTIONS = ("send", "accept", "reject", "expire")


class UpdateQuotationStatusHandler:

    def __init__(self, quotation_repo: QuotationRepository) -> None:
        self._quotation_repo = quotation_repo

    def handle(self, quotation_id: int, action: str) -> DocumentDTO:
        if action not in ACTIONS:
            raise ValidationError(
                f"Unknown quotation action '{action}'. Expected one of: {', '.join(ACTIONS)}"
            )

        quotation = self._quotation_repo.get_by_id(quotation_id)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation #{quotation_id} not found")

        getattr(quotation, action)()
        self._quotation_repo.save(quotation)
        logger.info("Quotation %s -> %s", quotation.number, quotation.status.value)
        return document_to_dto(quotation)


class ShowQuotationHandler:

    def __init__(self, quotation_repo: QuotationRepository) -> None:
        self._quotation_repo = quotation_repo

    def handle(self, quotation_id: int) -> DocumentDTO:
        quotation = self._quotation_repo.get_by_id(quotation_id)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation #{quotation_id} not found")
        return document_to_dto(quotation)
