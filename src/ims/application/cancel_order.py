"""Application service: Cancel Order use case.

Stock already allocated to the order's lines is returned to the shelf
before the order is cancelled; unallocated lines need no inventory
change.
"""

from __future__ import annotations

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._activity_log = activity_log

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        # Validate the transition before touching stock.
        order.ensure_cancellable()

        svc = InventoryAllocationService(self._product_repo, self._activity_log)
        svc.release(order)

        order.cancel()
        self._order_repo.save(order)
