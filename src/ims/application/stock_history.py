"""Application service: Stock Movement History use case (query)."""

from __future__ import annotations

from ims.domain.model.stock import StockMovement
from ims.domain.repository.activity_log import ActivityLog


class StockHistoryHandler:

    def __init__(self, activity_log: ActivityLog) -> None:
        self._activity_log = activity_log

    def handle(self, product_id: str | None = None, limit: int = 50) -> list[StockMovement]:
        return self._activity_log.list_for_product(product_id, limit=limit)
