"""Abstract append-only log of stock movements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.stock import StockMovement


class ActivityLog(ABC):

    @abstractmethod
    def append(self, movement: StockMovement) -> None:
        """Record a stock movement."""

    @abstractmethod
    def list_for_product(self, product_id: str | None = None, limit: int = 50) -> list[StockMovement]:
        """Most recent movements first, optionally for one product."""
