"""Domain service: bulk product operations.

Applies one operation across a selection of product IDs. The run is NOT
all-or-nothing: each product is attempted on its own and a failure (most
commonly an unknown ID) is recorded against that product while the rest
carry on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ims.domain.exceptions import DomainException, ProductNotFound
from ims.domain.model.bulk import (
    BulkItemResult,
    BulkOperation,
    BulkOperationReport,
    DeleteProducts,
    ExportProducts,
    UpdateCategory,
    UpdateMinStock,
    UpdatePrice,
    UpdateStock,
)
from ims.domain.model.product import Product
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.inventory_export import export_row
from ims.domain.service.stock_adjustment import apply_adjustment

logger = logging.getLogger(__name__)


def unique_ids(product_ids: Iterable[str]) -> list[str]:
    """Drop repeated IDs, keeping the first occurrence's position."""
    return list(dict.fromkeys(product_ids))


class BulkOperationCoordinator:

    def __init__(
        self,
        product_repo: ProductRepository,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._activity_log = activity_log

    def apply(self, operation: BulkOperation, product_ids: Iterable[str]) -> BulkOperationReport:
        """Run *operation* on every distinct ID and report each outcome.

        ``delete`` is irreversible at the repository; confirm with the
        user before calling.
        """
        ids = unique_ids(product_ids)
        logger.info("Bulk %s started for %d products", operation.kind.value, len(ids))

        results: list[BulkItemResult] = []
        for product_id in ids:
            try:
                new_value = self._apply_one(operation, product_id)
            except DomainException as exc:
                logger.warning(
                    "Bulk %s failed for product %s: %s",
                    operation.kind.value, product_id, exc,
                )
                results.append(BulkItemResult(product_id, success=False, error=str(exc)))
            else:
                results.append(BulkItemResult(product_id, success=True, new_value=new_value))

        report = BulkOperationReport(kind=operation.kind, results=results)
        logger.info(
            "Bulk %s finished: %d succeeded, %d failed",
            operation.kind.value, len(report.succeeded), len(report.failed),
        )
        return report

    # --- Per-item dispatch ----------------------------------------------------

    def _apply_one(self, operation: BulkOperation, product_id: str) -> Any:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        if isinstance(operation, UpdatePrice):
            product.update_price(operation.apply(product.price))
            self._product_repo.save(product)
            return product.price

        if isinstance(operation, UpdateCategory):
            product.change_category(operation.category)
            self._product_repo.save(product)
            return product.category

        if isinstance(operation, UpdateStock):
            return self._update_stock(product, operation)

        if isinstance(operation, UpdateMinStock):
            product.update_min_stock_level(operation.level)
            self._product_repo.save(product)
            return product.min_stock_level

        if isinstance(operation, ExportProducts):
            return export_row(product)

        if isinstance(operation, DeleteProducts):
            self._product_repo.delete(product.id)
            return None

        raise TypeError(f"Unsupported bulk operation: {operation!r}")

    def _update_stock(self, product: Product, operation: UpdateStock) -> int:
        result = apply_adjustment(product.stock_quantity, operation.adjustment, operation.reason)
        product.set_stock_quantity(result.new_quantity)
        self._product_repo.save(product)
        if self._activity_log is not None:
            self._activity_log.append(result.movement.for_product(product.id))
        return result.new_quantity
