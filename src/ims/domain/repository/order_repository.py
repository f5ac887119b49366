"""Abstract repository for SalesOrder aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.document import SalesOrder


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> SalesOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[SalesOrder]:
        """Return every order."""

    @abstractmethod
    def save(self, order: SalesOrder) -> None:
        """Persist a new or updated order."""
