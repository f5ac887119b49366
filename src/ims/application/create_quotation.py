"""Application service: Create Quotation use case.

Orchestrates the flow between repositories and the domain model:
product lookup (price snapshot) and Quotation creation.
"""

from __future__ import annotations

import logging

from ims.application.dto import DocumentDTO, LineItemSpec, document_to_dto
from ims.application.line_items import build_line_items, next_number
from ims.domain.model.document import DEFAULT_TAX_RATE, QUOTATION_PREFIX, Quotation
from ims.domain.model.pricing import Discount
from ims.domain.model.value_objects import Percentage
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.quotation_repository import QuotationRepository

logger = logging.getLogger(__name__)


class CreateQuotationHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._quotation_repo = quotation_repo
        self._product_repo = product_repo

    def handle(
        self,
        customer_name: str,
        item_specs: list[LineItemSpec],
        tax_rate: str | None = None,
        discount: str | None = None,
    ) -> DocumentDTO:
        """Create a draft quotation.

        ``tax_rate`` is a percentage (default 10); ``discount`` is either
        ``'15%'`` or a fixed amount such as ``'25.00'``.
        """
        items = build_line_items(item_specs, self._product_repo)
        number = next_number(
            QUOTATION_PREFIX, (q.created_at for q in self._quotation_repo.list_all())
        )

        quotation = Quotation.create(
            number=number,
            customer_name=customer_name,
            items=items,
            tax_rate=Percentage.from_value(tax_rate) if tax_rate is not None else DEFAULT_TAX_RATE,
            discount=Discount.parse(discount) if discount else None,
        )
        self._quotation_repo.save(quotation)
        logger.info("Created quotation %s for %s", quotation.number, quotation.customer_name)
        return document_to_dto(quotation)
