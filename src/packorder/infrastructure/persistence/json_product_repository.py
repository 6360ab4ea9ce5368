"""JSON-file-backed implementation of ProductRepository.

The catalog file is a list of products::

    [{"code": "VS5", "name": "Vegemite Scroll",
      "packs": [{"size": 3, "price": "6.99"}, {"size": 5, "price": "8.99"}]}]

It is read and validated once, when the repository is built, so a
broken catalog fails at startup rather than in the middle of an order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.pack import Pack
from packorder.domain.model.product import Product
from packorder.domain.model.value_objects import Money
from packorder.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._products = self._load()

    # --- ProductRepository interface ------------------------------------------

    def get_by_code(self, code: str) -> Product | None:
        return self._products.get(code)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        if not self._file_path.exists():
            raise ValidationError(f"Catalog file does not exist: {self._file_path}")
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog file is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise ValidationError("Catalog root must be a list of products")

        products: dict[str, Product] = {}
        for item in raw:
            product = self._to_domain(item)
            if product.code in products:
                raise ValidationError(f"Duplicate product code in catalog: {product.code}")
            products[product.code] = product

        logger.info("Loaded %d product(s) from %s", len(products), self._file_path)
        return products

    @staticmethod
    def _to_domain(item: dict) -> Product:
        try:
            return Product(
                code=item["code"],
                name=item.get("name", item["code"]),
                packs=tuple(
                    Pack(size=p["size"], price=Money.of(p["price"]))
                    for p in item["packs"]
                ),
            )
        except (AttributeError, KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed catalog entry {item!r}: {exc}") from exc
