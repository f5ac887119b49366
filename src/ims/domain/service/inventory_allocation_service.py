"""Domain service: inventory allocation for sales orders.

Coordinates the cross-aggregate operation of taking stock from products
for the lines of an order. Allocation is per line: a line whose product
is short stays unallocated and the remaining lines are still attempted,
so an order can be partially allocated and topped up later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError
from ims.domain.model.document import OrderStatus, SalesOrder
from ims.domain.model.stock import AdjustmentMode, StockAdjustment
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.stock_adjustment import apply_adjustment

logger = logging.getLogger(__name__)

ALLOCATION_REASON = "order_allocation"
RELEASE_REASON = "order_cancellation"


@dataclass(frozen=True)
class AllocationResult:
    allocated: int
    total: int
    short_items: list[str]

    @property
    def is_complete(self) -> bool:
        return self.allocated == self.total


class InventoryAllocationService:

    def __init__(
        self,
        product_repo: ProductRepository,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._activity_log = activity_log

    def allocate(self, order: SalesOrder) -> AllocationResult:
        """Allocate stock for every catalog line not yet allocated.

        Custom lines (no product) are skipped. Lines already allocated are
        counted but not deducted twice.
        """
        if order.status in (OrderStatus.CANCELLED, OrderStatus.DELIVERED):
            raise ValidationError(
                f"Cannot allocate inventory for order in {order.status.value} status"
            )

        allocated = 0
        total = 0
        short_items: list[str] = []

        for line in order.items:
            if line.product_id is None:
                continue
            total += 1
            if line.inventory_allocated:
                allocated += 1
                continue

            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Order %s: product %s no longer exists", order.number, line.product_id
                )
                short_items.append(line.description)
                continue

            qty = line.quantity.value
            if product.stock_quantity < qty:
                logger.info(
                    "Order %s: %s short (need %d, have %d)",
                    order.number, product.name, qty, product.stock_quantity,
                )
                short_items.append(line.description)
                continue

            result = apply_adjustment(
                product.stock_quantity,
                StockAdjustment(AdjustmentMode.DECREASE, qty),
                f"{ALLOCATION_REASON}:{order.number}",
            )
            product.set_stock_quantity(result.new_quantity)
            self._product_repo.save(product)
            if self._activity_log is not None:
                self._activity_log.append(result.movement.for_product(product.id))

            line.inventory_allocated = True
            allocated += 1

        logger.info("Order %s: allocated %d of %d lines", order.number, allocated, total)
        return AllocationResult(allocated=allocated, total=total, short_items=short_items)

    def release(self, order: SalesOrder) -> int:
        """Return allocated stock to the shelf; returns lines released.

        Used when an order is cancelled. Lines whose product has since been
        deleted are un-flagged without restocking anything.
        """
        released = 0
        for line in order.items:
            if line.product_id is None or not line.inventory_allocated:
                continue

            product = self._product_repo.get_by_id(line.product_id)
            if product is not None:
                result = apply_adjustment(
                    product.stock_quantity,
                    StockAdjustment(AdjustmentMode.INCREASE, line.quantity.value),
                    f"{RELEASE_REASON}:{order.number}",
                )
                product.set_stock_quantity(result.new_quantity)
                self._product_repo.save(product)
                if self._activity_log is not None:
                    self._activity_log.append(result.movement.for_product(product.id))

            line.inventory_allocated = False
            released += 1

        logger.info("Order %s: released %d allocated lines", order.number, released)
        return released
