"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from ims.domain.model.document import OrderStatus, Payment, SalesOrder
from ims.domain.model.value_objects import Money
from ims.domain.repository.order_repository import OrderRepository
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


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> int:
        return self._file.next_int_id()

    def get_by_id(self, order_id: int) -> SalesOrder | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[SalesOrder]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, order: SalesOrder) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._file.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: SalesOrder) -> dict:
        return {
            "id": order.id,
            "number": order.number,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "quotation_number": order.quotation_number,
            "notes": order.notes,
            "created_at": dt_to_raw(order.created_at),
            "shipped_at": dt_to_raw(order.shipped_at),
            "delivered_at": dt_to_raw(order.delivered_at),
            **pricing_to_raw(order.tax_rate, order.discount),
            "payments": [
                {
                    "amount": str(p.amount.amount),
                    "currency": p.amount.currency,
                    "recorded_at": dt_to_raw(p.recorded_at),
                }
                for p in order.payments
            ],
            "items": items_to_raw(order.items),
        }

    @staticmethod
    def _to_domain(raw: dict) -> SalesOrder:
        return SalesOrder(
            items=items_from_raw(raw["items"]),
            tax_rate=tax_rate_from_raw(raw),
            discount=discount_from_raw(raw),
            id=raw["id"],
            number=raw["number"],
            customer_name=raw["customer_name"],
            status=OrderStatus(raw["status"]),
            created_at=dt_from_raw(raw["created_at"]),
            quotation_number=raw.get("quotation_number"),
            notes=raw.get("notes", ""),
            payments=[
                Payment(
                    amount=Money(Decimal(p["amount"]), p.get("currency", "USD")),
                    recorded_at=dt_from_raw(p["recorded_at"]),
                )
                for p in raw.get("payments", [])
            ],
            shipped_at=dt_from_raw(raw.get("shipped_at")),
            delivered_at=dt_from_raw(raw.get("delivered_at")),
        )
