"""Abstract repository for Quotation aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.document import Quotation


class QuotationRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique quotation ID."""

    @abstractmethod
    def get_by_id(self, quotation_id: int) -> Quotation | None:
        """Return a quotation by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Quotation]:
        """Return every quotation."""

    @abstractmethod
    def save(self, quotation: Quotation) -> None:
        """Persist a new or updated quotation."""
