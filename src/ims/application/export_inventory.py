"""Application service: Export Inventory use case."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError
from ims.domain.model.bulk import ExportFormat
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.inventory_export import export_filename, export_row, render


@dataclass(frozen=True)
class ExportDTO:
    filename: str
    content: str
    row_count: int


class ExportInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, export_format: str = "csv") -> ExportDTO:
        try:
            fmt = ExportFormat(export_format.strip().lower())
        except ValueError:
            raise ValidationError(f"Unsupported export format: {export_format!r}") from None

        rows = [export_row(p) for p in self._product_repo.list_all()]
        return ExportDTO(
            filename=export_filename(fmt),
            content=render(rows, fmt),
            row_count=len(rows),
        )
