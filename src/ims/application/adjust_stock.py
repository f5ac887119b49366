"""Application service: Adjust Stock use case.

Loads the product, lets the adjustment engine compute the new level,
writes it back and appends the movement to the activity log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ims.domain.exceptions import ProductNotFound
from ims.domain.model.notification import Notification
from ims.domain.model.stock import AdjustmentMode, StockAdjustment, StockAlert, StockMovement
from ims.domain.repository.activity_log import ActivityLog
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.reorder_advisor import restock_target
from ims.domain.service.stock_adjustment import apply_adjustment
from ims.domain.service.stock_classifier import evaluate_alert

logger = logging.getLogger(__name__)

RESTOCK_REASON = "quick_restock"


@dataclass(frozen=True)
class AdjustmentOutcome:
    product_id: str
    product_name: str
    movement: StockMovement
    alert: StockAlert | None
    notifications: list[Notification]

    @property
    def new_quantity(self) -> int:
        return self.movement.new_quantity


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository, activity_log: ActivityLog) -> None:
        self._product_repo = product_repo
        self._activity_log = activity_log

    def handle(
        self,
        product_id: str,
        mode: str,
        value: int | str,
        reason: str | None = None,
    ) -> AdjustmentOutcome:
        adjustment = StockAdjustment.of(mode, value)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        result = apply_adjustment(product.stock_quantity, adjustment, reason)
        product.set_stock_quantity(result.new_quantity)
        self._product_repo.save(product)

        movement = result.movement.for_product(product.id)
        self._activity_log.append(movement)
        logger.info("Stock adjusted: %s [%s]", movement.describe(product.name), movement.reason)

        notifications = [Notification.success(f"Stock updated: {movement.describe(product.name)}")]
        if result.clamped:
            notifications.append(
                Notification.warning(
                    f"Requested decrease of {adjustment.value} exceeded stock; "
                    f"{product.name} clamped at 0"
                )
            )
        alert = evaluate_alert(product)
        if alert is not None:
            notifications.append(Notification.warning(alert.message))

        return AdjustmentOutcome(
            product_id=product.id,
            product_name=product.name,
            movement=movement,
            alert=alert,
            notifications=notifications,
        )

    def restock(self, product_id: str) -> AdjustmentOutcome:
        """Quick restock: set the level to the minimum plus half again."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        target = restock_target(product)
        return self.handle(product_id, AdjustmentMode.SET.value, target, RESTOCK_REASON)
