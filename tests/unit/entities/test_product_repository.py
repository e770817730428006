"""Unit tests for ProductRepository against in-memory SQLite."""

import pytest
from sqlmodel import Session, select

from src.app.core.exceptions import NoRowsMatchedError
from src.app.entities.service.product import (
    Product,
    ProductFilter,
    ProductRepository,
    ProductTable,
)


class TestProductFilter:
    """Test filter criteria construction."""

    def test_empty_filter_has_no_criteria(self):
        assert ProductFilter().criteria() == {}
        assert ProductFilter().clauses() == []

    def test_criteria_skip_unset_fields(self):
        assert ProductFilter(id=3).criteria() == {"id": 3}
        assert ProductFilter(available=False).criteria() == {"available": False}
        assert ProductFilter(id=3, available=True).criteria() == {
            "id": 3,
            "available": True,
        }


class TestProductRepository:
    """Test the ProductRepository in isolation."""

    def test_insert_returns_domain_entity_with_generated_id(
        self, product_repository: ProductRepository
    ):
        product = product_repository.insert({"name": "Widget", "price": 9.99})

        assert isinstance(product, Product)
        assert not isinstance(product, ProductTable)
        assert product.id == 1
        assert product.name == "Widget"
        assert product.price == 9.99
        assert product.description is None
        assert product.available is True

    def test_insert_assigns_increasing_ids(self, product_repository: ProductRepository):
        first = product_repository.insert({"name": "A", "price": 1.0})
        second = product_repository.insert({"name": "B", "price": 2.0})

        assert second.id > first.id

    def test_count_applies_filter(self, product_repository: ProductRepository, make_product):
        make_product(name="A")
        make_product(name="B")
        make_product(name="C", available=False)

        assert product_repository.count(ProductFilter()) == 3
        assert product_repository.count(ProductFilter(available=True)) == 2
        assert product_repository.count(ProductFilter(available=False)) == 1

    def test_find_many_orders_by_id_and_slices(
        self, product_repository: ProductRepository, make_product
    ):
        rows = [make_product(name=f"P{i}") for i in range(5)]

        page = product_repository.find_many(ProductFilter(), offset=1, limit=2)

        assert [p.id for p in page] == [rows[1].id, rows[2].id]

    def test_find_many_past_the_end_is_empty(
        self, product_repository: ProductRepository, make_product
    ):
        make_product()

        assert product_repository.find_many(ProductFilter(), offset=10, limit=10) == []

    def test_find_many_applies_filter(
        self, product_repository: ProductRepository, make_product
    ):
        kept = make_product(name="Kept")
        make_product(name="Removed", available=False)

        page = product_repository.find_many(ProductFilter(available=True), offset=0, limit=10)

        assert [p.id for p in page] == [kept.id]

    def test_find_first_returns_none_when_nothing_matches(
        self, product_repository: ProductRepository, make_product
    ):
        row = make_product(available=False)

        assert product_repository.find_first(ProductFilter(id=999)) is None
        assert product_repository.find_first(ProductFilter(id=row.id, available=True)) is None

    def test_find_first_returns_matching_product(
        self, product_repository: ProductRepository, make_product
    ):
        row = make_product(name="Lamp", description="Desk lamp")

        product = product_repository.find_first(ProductFilter(id=row.id))

        assert product is not None
        assert product.id == row.id
        assert product.description == "Desk lamp"

    def test_update_where_applies_patch_and_returns_fresh_row(
        self, product_repository: ProductRepository, make_product, session: Session
    ):
        row = make_product(name="Old", price=1.0)

        product = product_repository.update_where(
            ProductFilter(id=row.id), {"name": "New", "price": 2.5}
        )

        assert product.name == "New"
        assert product.price == 2.5
        stored = session.exec(select(ProductTable).where(ProductTable.id == row.id)).one()
        assert stored.name == "New"

    def test_update_where_raises_when_no_rows_match(
        self, product_repository: ProductRepository, make_product
    ):
        row = make_product(available=False)

        with pytest.raises(NoRowsMatchedError) as exc_info:
            product_repository.update_where(
                ProductFilter(id=row.id, available=True), {"available": False}
            )

        assert exc_info.value.table == "product"
        assert exc_info.value.criteria == {"id": row.id, "available": True}

    def test_update_where_requires_id(self, product_repository: ProductRepository):
        with pytest.raises(ValueError):
            product_repository.update_where(ProductFilter(available=True), {"name": "X"})

    def test_update_where_refreshes_updated_at(
        self, product_repository: ProductRepository, make_product
    ):
        row = make_product()
        before = row.updated_at

        product = product_repository.update_where(ProductFilter(id=row.id), {"name": "Y"})

        assert product.updated_at >= before
