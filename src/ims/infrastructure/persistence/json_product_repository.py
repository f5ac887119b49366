"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from ims.domain.model.product import DEFAULT_CATEGORY, Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> str:
        numeric = [int(r["id"]) for r in self._file.read() if str(r["id"]).isdigit()]
        return str(max(numeric, default=0) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.read():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.lower()
        for raw in self._file.read():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, product: Product) -> None:
        self._file.upsert(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        records = self._file.read()
        remaining = [r for r in records if r["id"] != product_id]
        if len(remaining) != len(records):
            self._file.write(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "sku": p.sku,
            "name": p.name,
            "category": p.category,
            "currency": p.price.currency,
            "price": str(p.price.amount),
            "cost": str(p.cost.amount) if p.cost is not None else None,
            "stock_quantity": p.stock_quantity,
            "min_stock_level": p.min_stock_level,
            "is_active": p.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        cost = raw.get("cost")
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), currency),
            sku=raw.get("sku", ""),
            category=raw.get("category") or DEFAULT_CATEGORY,
            cost=Money(Decimal(cost), currency) if cost is not None else None,
            stock_quantity=raw.get("stock_quantity", 0),
            min_stock_level=raw.get("min_stock_level", 0),
            is_active=raw.get("is_active", True),
        )
