"""JSON-file-backed implementation of ActivityLog (append-only)."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from ims.domain.model.stock import StockMovement
from ims.domain.repository.activity_log import ActivityLog
from ims.infrastructure.persistence.json_file import JsonFile


class JsonActivityLog(ActivityLog):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def append(self, movement: StockMovement) -> None:
        records = self._file.read()
        records.append(self._to_raw(movement))
        self._file.write(records)

    def list_for_product(self, product_id: str | None = None, limit: int = 50) -> list[StockMovement]:
        records = self._file.read()
        if product_id is not None:
            records = [r for r in records if r["product_id"] == product_id]
        return [self._to_domain(r) for r in reversed(records[-limit:])] if limit > 0 else []

    @staticmethod
    def _to_raw(movement: StockMovement) -> dict:
        return {
            "activity_type": "stock_movement",
            "product_id": movement.product_id,
            "old_quantity": movement.old_quantity,
            "new_quantity": movement.new_quantity,
            "quantity_diff": movement.delta,
            "reason": movement.reason,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockMovement:
        return StockMovement(
            old_quantity=raw["old_quantity"],
            new_quantity=raw["new_quantity"],
            reason=raw.get("reason", ""),
            product_id=raw["product_id"],
        )
