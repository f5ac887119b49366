"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.stock_classifier import product_status


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    sku: str
    category: str
    price: str
    stock: int
    min_level: int
    status: str


class ShowInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, status: str | None = None) -> list[InventoryLineDTO]:
        lines = [
            InventoryLineDTO(
                product_id=p.id,
                product_name=p.name,
                sku=p.sku,
                category=p.category,
                price=str(p.price),
                stock=p.stock_quantity,
                min_level=p.min_stock_level,
                status=product_status(p).value,
            )
            for p in self._product_repo.list_all()
        ]
        if status is not None:
            lines = [line for line in lines if line.status == status]
        return lines
