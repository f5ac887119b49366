"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from ims.infrastructure.persistence.json_activity_log import JsonActivityLog
from ims.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ims.infrastructure.persistence.json_quotation_repository import (
    JsonQuotationRepository,
)

DATA_DIR_ENV = "IMS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override).expanduser() if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def activity_log() -> JsonActivityLog:
    return JsonActivityLog(data_dir() / "activities.json")


def quotation_repository() -> JsonQuotationRepository:
    return JsonQuotationRepository(data_dir() / "quotations.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")
