"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only place that reads configuration from the environment:

- ``PACKORDER_CATALOG``       catalog JSON file (default: data/catalog.json)
- ``PACKORDER_MAX_QUANTITY``  largest quantity accepted per item (default: no cap)
- ``PACKORDER_LOG_LEVEL``     logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from packorder.application.order_manager import OrderManager
from packorder.domain.exceptions import ValidationError
from packorder.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from packorder.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

CATALOG_ENV = "PACKORDER_CATALOG"
MAX_QUANTITY_ENV = "PACKORDER_MAX_QUANTITY"
LOG_LEVEL_ENV = "PACKORDER_LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def catalog_path() -> Path:
    configured = os.environ.get(CATALOG_ENV)
    if configured:
        return Path(configured)
    return _DATA_DIR / "catalog.json"


def max_quantity() -> int | None:
    configured = os.environ.get(MAX_QUANTITY_ENV)
    if not configured:
        return None
    try:
        value = int(configured)
    except ValueError as exc:
        raise ValidationError(f"{MAX_QUANTITY_ENV} must be an integer, got {configured!r}") from exc
    if value <= 0:
        raise ValidationError(f"{MAX_QUANTITY_ENV} must be positive, got {value}")
    return value


def configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING")
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(catalog_path())


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


def order_manager() -> OrderManager:
    return OrderManager(
        product_repo=product_repository(),
        order_repo=order_repository(),
        max_quantity=max_quantity(),
    )
