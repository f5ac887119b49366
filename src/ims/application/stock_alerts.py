"""Application service: Stock Alerts and Reorder Suggestions (queries)."""

from __future__ import annotations

from ims.domain.model.stock import ReorderSuggestion, StockAlert
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.reorder_advisor import reorder_suggestions
from ims.domain.service.stock_classifier import stock_alerts


class StockAlertsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, severity: str | None = None) -> list[StockAlert]:
        alerts = stock_alerts(self._product_repo.list_all())
        if severity is not None:
            alerts = [a for a in alerts if a.severity.value == severity]
        return alerts


class ReorderSuggestionsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sort_by: str = "priority") -> list[ReorderSuggestion]:
        return reorder_suggestions(self._product_repo.list_all(), sort_by=sort_by)
