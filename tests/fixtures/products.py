from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from sqlmodel import Session

from src.app.core.exceptions import NoRowsMatchedError
from src.app.core.services import ProductService
from src.app.entities.service.product import (
    Product,
    ProductCreate,
    ProductFilter,
    ProductRepository,
    ProductTable,
)


class InMemoryProductStore:
    """Dict-backed product store used to exercise ProductService without a database."""

    def __init__(self) -> None:
        self.rows: dict[int, Product] = {}
        self._next_id = 1

    def _matches(self, product: Product, where: ProductFilter) -> bool:
        return all(getattr(product, k) == v for k, v in where.criteria().items())

    def count(self, where: ProductFilter) -> int:
        return sum(1 for p in self.rows.values() if self._matches(p, where))

    def find_many(self, where: ProductFilter, offset: int, limit: int) -> list[Product]:
        matching = [p for _, p in sorted(self.rows.items()) if self._matches(p, where)]
        return matching[offset : offset + limit]

    def find_first(self, where: ProductFilter) -> Product | None:
        return next(iter(self.find_many(where, 0, 1)), None)

    def insert(self, fields: dict[str, Any]) -> Product:
        product = Product(id=self._next_id, **fields)
        self.rows[product.id] = product
        self._next_id += 1
        return product

    def update_where(self, where: ProductFilter, patch: dict[str, Any]) -> Product:
        current = self.find_first(where)
        if current is None:
            raise NoRowsMatchedError("product", where.criteria())
        updated = current.model_copy(update=patch)
        self.rows[updated.id] = updated
        return updated


class FailingProductStore(InMemoryProductStore):
    """Store whose writes fail with a driver-level error."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    def update_where(self, where: ProductFilter, patch: dict[str, Any]) -> Product:
        raise self.error


@pytest.fixture
def product_repository(session: Session) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def product_service(product_repository: ProductRepository) -> ProductService:
    return ProductService(product_repository)


@pytest.fixture
def memory_store() -> InMemoryProductStore:
    return InMemoryProductStore()


@pytest.fixture
def make_product(session: Session) -> Callable[..., ProductTable]:
    """Insert a product row directly, bypassing the service."""

    def _make(
        name: str = "Widget",
        price: float = 9.99,
        description: str | None = None,
        available: bool = True,
    ) -> ProductTable:
        row = ProductTable(
            name=name, price=price, description=description, available=available
        )
        session.add(row)
        session.commit()
        session.refresh(row)
        return row

    return _make


@pytest.fixture
def widget_input() -> ProductCreate:
    return ProductCreate(name="Widget", price=9.99)
