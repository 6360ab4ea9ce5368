"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from packorder.application.dto import CatalogLineDTO
from packorder.domain.repository.product_repository import ProductRepository


class ListCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                code=product.code,
                name=product.name,
                packs=[(pack.size, str(pack.price)) for pack in product.packs],
            )
            for product in self._product_repo.list_all()
        ]
