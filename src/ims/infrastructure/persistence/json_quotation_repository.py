"""JSON-file-backed implementation of QuotationRepository."""

from __future__ import annotations

from pathlib import Path

from ims.domain.model.document import Quotation, QuotationStatus
from ims.domain.repository.quotation_repository import QuotationRepository
from ims.infrastructure.persistence.document_codec import (
    discount_from_raw,
    dt_from_raw,
    dt_to_raw,
    items_from_raw,
    items_to_raw,
    pricing_to_raw,
    tax_rate_from_raw,
)
from ims.infrastructure.persistence.json_file import JsonFile


class JsonQuotationRepository(QuotationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> int:
        return self._file.next_int_id()

    def get_by_id(self, quotation_id: int) -> Quotation | None:
        for raw in self._file.read():
            if raw["id"] == quotation_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Quotation]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, quotation: Quotation) -> None:
        if quotation.id is None:
            quotation.id = self.next_id()
        self._file.upsert(self._to_raw(quotation))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(q: Quotation) -> dict:
        return {
            "id": q.id,
            "number": q.number,
            "customer_name": q.customer_name,
            "status": q.status.value,
            "created_at": dt_to_raw(q.created_at),
            "sent_at": dt_to_raw(q.sent_at),
            "accepted_at": dt_to_raw(q.accepted_at),
            "converted_order_number": q.converted_order_number,
            **pricing_to_raw(q.tax_rate, q.discount),
            "items": items_to_raw(q.items),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Quotation:
        return Quotation(
            items=items_from_raw(raw["items"]),
            tax_rate=tax_rate_from_raw(raw),
            discount=discount_from_raw(raw),
            id=raw["id"],
            number=raw["number"],
            customer_name=raw["customer_name"],
            status=QuotationStatus(raw["status"]),
            created_at=dt_from_raw(raw["created_at"]),
            sent_at=dt_from_raw(raw.get("sent_at")),
            accepted_at=dt_from_raw(raw.get("accepted_at")),
            converted_order_number=raw.get("converted_order_number"),
        )
