"""Application service: Inventory Valuation use case (query)."""

from __future__ import annotations

from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.valuation import InventoryValuation, value_inventory


class ShowValuationHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> InventoryValuation:
        return value_inventory(self._product_repo.list_all())
