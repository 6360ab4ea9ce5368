"""Tests for the JSON catalog and the in-memory order store."""

import json

import pytest

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.order import Order, OrderItem
from packorder.domain.model.value_objects import Money, Quantity
from packorder.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from packorder.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import bakery_products


def _write(path, payload) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


class TestJsonProductRepository:

    def test_loads_and_sorts_packs(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [
            {"code": "MB11", "name": "Blueberry Muffin", "packs": [
                {"size": 8, "price": "24.95"},
                {"size": 2, "price": "9.95"},
                {"size": 5, "price": "16.95"},
            ]},
        ])
        product = JsonProductRepository(catalog).get_by_code("MB11")
        assert product is not None
        assert [pack.size for pack in product.packs] == [2, 5, 8]
        assert product.packs[0].price == Money.of("9.95")

    def test_unknown_code_returns_none(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [])
        assert JsonProductRepository(catalog).get_by_code("VS5") is None

    def test_list_all_keeps_file_order(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [
            {"code": "VS5", "name": "Vegemite Scroll", "packs": [{"size": 3, "price": "6.99"}]},
            {"code": "CF", "name": "Croissant", "packs": [{"size": 3, "price": "5.95"}]},
        ])
        assert [p.code for p in JsonProductRepository(catalog).list_all()] == ["VS5", "CF"]

    def test_name_defaults_to_code(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [{"code": "CF", "packs": [{"size": 3, "price": "5.95"}]}])
        assert JsonProductRepository(catalog).get_by_code("CF").name == "CF"

    def test_missing_file_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            JsonProductRepository(tmp_path / "missing.json")

    def test_invalid_json_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonProductRepository(catalog)

    def test_root_must_be_list(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, {"code": "CF"})
        with pytest.raises(ValidationError, match="must be a list"):
            JsonProductRepository(catalog)

    def test_duplicate_code_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        entry = {"code": "CF", "name": "Croissant", "packs": [{"size": 3, "price": "5.95"}]}
        _write(catalog, [entry, entry])
        with pytest.raises(ValidationError, match="Duplicate product code"):
            JsonProductRepository(catalog)

    def test_missing_packs_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [{"code": "CF", "name": "Croissant"}])
        with pytest.raises(ValidationError, match="Malformed catalog entry"):
            JsonProductRepository(catalog)

    def test_empty_packs_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [{"code": "CF", "name": "Croissant", "packs": []}])
        with pytest.raises(ValidationError, match="at least one pack"):
            JsonProductRepository(catalog)

    def test_non_positive_pack_size_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [{"code": "CF", "name": "Croissant", "packs": [{"size": 0, "price": "1"}]}])
        with pytest.raises(ValidationError, match="must be positive"):
            JsonProductRepository(catalog)

    def test_non_finite_price_rejected(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        _write(catalog, [{"code": "CF", "name": "Croissant", "packs": [{"size": 3, "price": "Infinity"}]}])
        with pytest.raises(ValidationError, match="must be finite"):
            JsonProductRepository(catalog)


class TestInMemoryOrderRepository:

    def _order(self, order_id="order_1") -> Order:
        item = OrderItem(product=bakery_products()[0], quantity=Quantity(10))
        return Order.create(order_id, [item])

    def test_save_and_get(self):
        repo = InMemoryOrderRepository()
        order = self._order()
        repo.save(order)
        assert repo.get_by_id("order_1") is order

    def test_missing_order(self):
        assert InMemoryOrderRepository().get_by_id("nope") is None

    def test_list_all_oldest_first(self):
        repo = InMemoryOrderRepository()
        repo.save(self._order("b"))
        repo.save(self._order("a"))
        assert [o.id for o in repo.list_all()] == ["b", "a"]

    def test_existing_id_not_overwritten(self):
        repo = InMemoryOrderRepository()
        first = self._order()
        repo.save(first)
        with pytest.raises(ValidationError, match="already stored"):
            repo.save(self._order())
        assert repo.get_by_id("order_1") is first
