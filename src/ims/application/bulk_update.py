"""Application service: Bulk Product Operation use case.

Validates the raw operation parameters into a typed operation before
anything is touched, then hands the selection to the coordinator. An
invalid operation raises; per-product failures do not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ims.domain.model.bulk import BulkOperationReport, parse_bulk_operation
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.bulk_operations import BulkOperationCoordinator


class BulkOperationHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self._coordinator = BulkOperationCoordinator(product_repo, activity_log)

    def handle(
        self,
        kind: str,
        product_ids: list[str],
        params: Mapping[str, Any] | None = None,
    ) -> BulkOperationReport:
        operation = parse_bulk_operation(kind, params)
        return self._coordinator.apply(operation, product_ids)
