"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from ims.domain.exceptions import ProductNotFound
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        price: str | None = None,
        category: str | None = None,
        min_stock_level: int | None = None,
        active: bool | None = None,
    ) -> Product:
        """Change any of the given product fields; ``None`` leaves one as is."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        if price is not None:
            product.update_price(Money.of(price))
        if category is not None:
            product.change_category(category)
        if min_stock_level is not None:
            product.update_min_stock_level(min_stock_level)
        if active is True:
            product.activate()
        elif active is False:
            product.deactivate()

        self._product_repo.save(product)
        logger.info("Updated product %s '%s'", product.id, product.name)
        return product
