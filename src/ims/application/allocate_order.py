"""Application service: Allocate Order Inventory use case.

Confirms a pending order on first allocation; later runs only retry the
lines that were short.
"""

from __future__ import annotations

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.document import OrderStatus
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.inventory_allocation_service import (
    AllocationResult,
    InventoryAllocationService,
)


class AllocateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._activity_log = activity_log

    def handle(self, order_id: int) -> AllocationResult:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        svc = InventoryAllocationService(self._product_repo, self._activity_log)
        result = svc.allocate(order)

        if order.status == OrderStatus.PENDING:
            order.confirm()
        self._order_repo.save(order)
        return result
