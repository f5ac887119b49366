"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_CATEGORY, Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        sku: str = "",
        category: str = DEFAULT_CATEGORY,
        cost: str | None = None,
        stock_quantity: int = 0,
        min_stock_level: int = 0,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            sku=sku.strip(),
            category=category.strip().lower(),
            cost=Money.of(cost) if cost is not None else None,
            stock_quantity=stock_quantity,
            min_stock_level=min_stock_level,
        )
        self._product_repo.save(product)
        logger.info("Added product %s '%s'", product.id, product.name)
        return product
