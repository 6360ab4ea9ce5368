"""Unit tests for Product, Pack and Allocation."""

from decimal import Decimal

import pytest

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.allocation import Allocation
from packorder.domain.model.pack import Pack
from packorder.domain.model.product import Product
from packorder.domain.model.value_objects import Money


class TestPack:

    def test_of_factory(self):
        pack = Pack.of(5, "8.99")
        assert pack.size == 5
        assert pack.price == Money.of("8.99")

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Pack.of(0, "1.00")

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Pack.of(-2, "1.00")

    def test_fractional_size_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Pack(size=2.5, price=Money.of("1.00"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Pack.of(3, "-1.00")

    def test_free_pack_allowed(self):
        assert Pack.of(3, "0").price.amount == Decimal("0")


class TestProduct:

    def test_packs_sorted_ascending(self):
        product = Product.create("MB11", "Blueberry Muffin", [(8, "24.95"), (2, "9.95"), (5, "16.95")])
        assert [pack.size for pack in product.packs] == [2, 5, 8]

    def test_min_pack_size(self):
        product = Product.create("CF", "Croissant", [(9, "16.99"), (3, "5.95")])
        assert product.min_pack_size == 3

    def test_no_packs_rejected(self):
        with pytest.raises(ValidationError, match="at least one pack"):
            Product.create("VS5", "Vegemite Scroll", [])

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError, match="code is required"):
            Product.create("  ", "Nameless", [(1, "1.00")])

    def test_allocate_uses_product_packs(self):
        product = Product.create("VS5", "Vegemite Scroll", [(3, "6.99"), (5, "8.99")])
        allocation = product.allocate(10)
        assert allocation.is_complete
        assert [pack.size for pack in allocation.packs] == [5, 5]

    def test_allocate_leaves_product_unchanged(self):
        product = Product.create("VS5", "Vegemite Scroll", [(3, "6.99"), (5, "8.99")])
        before = product.packs
        product.allocate(10)
        product.allocate(4)
        assert product.packs == before


class TestAllocation:

    def _product(self) -> Product:
        return Product.create("MB11", "Blueberry Muffin", [(2, "9.95"), (5, "16.95"), (8, "24.95")])

    def test_calculate_sums_pack_prices(self):
        assert self._product().allocate(14).calculate() == Money.of("54.80")

    def test_calculate_rounds_to_cents(self):
        product = Product.create("X", "Odd", [(1, "0.333")])
        assert product.allocate(3).calculate().amount == Decimal("1.00")

    def test_calculate_incomplete_allocation_rejected(self):
        allocation = Allocation(quantity=4, packs=(), remainder=1)
        with pytest.raises(ValidationError, match="Cannot price qty:4"):
            allocation.calculate()

    def test_breakdown_groups_largest_first(self):
        breakdown = self._product().allocate(14).breakdown()
        assert [(pack.size, count) for pack, count in breakdown] == [(8, 1), (2, 3)]

    def test_breakdown_of_failed_allocation_is_empty(self):
        product = Product.create("VS5", "Vegemite Scroll", [(3, "6.99"), (5, "8.99")])
        assert product.allocate(4).breakdown() == []
