"""Domain service: stock status classification and low-stock alerts.

Pure functions over Product state. The half-minimum threshold is compared
against the exact product ``min_level * 0.5`` (not a floored integer), so a
quantity sitting exactly on it is reported as HIGH rather than MEDIUM.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ims.domain.model.product import Product
from ims.domain.model.stock import AlertSeverity, StockAlert, StockStatus

logger = logging.getLogger(__name__)


def classify_stock(quantity: int, min_level: int, is_active: bool = True) -> StockStatus:
    """Display status for a stock level."""
    if not is_active:
        return StockStatus.INACTIVE
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_level:
        return StockStatus.LOW_STOCK
    return StockStatus.NORMAL


def _is_critically_low(quantity: int, min_level: int) -> bool:
    # Same as quantity <= min_level * 0.5, kept in integers.
    return quantity * 2 <= min_level


def product_status(product: Product) -> StockStatus:
    return classify_stock(product.stock_quantity, product.min_stock_level, product.is_active)


def evaluate_alert(product: Product) -> StockAlert | None:
    """Return the alert a product currently raises, or None.

    Inactive products never raise alerts, whatever their quantity.
    """
    if not product.is_active:
        return None

    quantity = product.stock_quantity
    min_level = product.min_stock_level

    if quantity == 0:
        severity = AlertSeverity.CRITICAL
        message = f"{product.name} is out of stock"
    elif _is_critically_low(quantity, min_level):
        severity = AlertSeverity.HIGH
        message = f"{product.name} is critically low ({quantity} remaining)"
    elif quantity <= min_level:
        severity = AlertSeverity.MEDIUM
        message = (
            f"{product.name} is below minimum stock level ({quantity}/{min_level})"
        )
    else:
        return None

    return StockAlert(
        product_id=product.id,
        product_name=product.name,
        severity=severity,
        message=message,
        current_quantity=quantity,
        min_level=min_level,
    )


def stock_alerts(products: Iterable[Product]) -> list[StockAlert]:
    """All alerts for *products*, most severe first, then emptiest first."""
    alerts = [alert for alert in map(evaluate_alert, products) if alert is not None]
    alerts.sort(key=lambda a: (a.severity.rank, a.current_quantity))
    logger.debug("Evaluated stock alerts: %d raised", len(alerts))
    return alerts
