"""Product catalog operations with soft-delete semantics."""

from typing import Any, Protocol

from loguru import logger

from src.app.core.exceptions import NoRowsMatchedError, ProductNotFoundError
from src.app.core.models.pagination import PaginationRequest, PaginationResult
from src.app.entities.service.product import (
    Product,
    ProductCreate,
    ProductFilter,
    ProductUpdate,
)

AVAILABLE = ProductFilter(available=True)


class ProductStore(Protocol):
    """Record-store contract the service depends on."""

    def count(self, where: ProductFilter) -> int: ...

    def find_many(self, where: ProductFilter, offset: int, limit: int) -> list[Product]: ...

    def find_first(self, where: ProductFilter) -> Product | None: ...

    def insert(self, fields: dict[str, Any]) -> Product: ...

    def update_where(self, where: ProductFilter, patch: dict[str, Any]) -> Product: ...


class ProductService:
    """Create, list, fetch, update and soft-delete products.

    Removed products stay in the store with ``available=False`` and are hidden
    from ``find_one``, ``find_all`` and ``remove``. ``update`` deliberately
    ignores availability.
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def create(self, product_in: ProductCreate) -> Product:
        product = self._store.insert(product_in.model_dump())
        logger.info("Created product {}", product.id)
        return product

    def find_all(self, pagination: PaginationRequest) -> PaginationResult[Product]:
        total = self._store.count(AVAILABLE)
        if pagination.offset >= total:
            logger.debug("Page {} is past the last of {} products", pagination.page, total)
            return PaginationResult[Product].create([], pagination, total)
        data = self._store.find_many(AVAILABLE, offset=pagination.offset, limit=pagination.limit)
        logger.debug(
            "Listed {} of {} products (page={}, limit={})",
            len(data),
            total,
            pagination.page,
            pagination.limit,
        )
        return PaginationResult[Product].create(data, pagination, total)

    def find_one(self, product_id: int) -> Product:
        product = self._store.find_first(ProductFilter(id=product_id, available=True))
        if product is None:
            logger.warning("Product {} not found", product_id)
            raise ProductNotFoundError(product_id)
        return product

    def update(self, product_id: int, patch: ProductUpdate) -> Product:
        try:
            product = self._store.update_where(ProductFilter(id=product_id), patch.changes())
        except NoRowsMatchedError as e:
            logger.warning("Product {} not found for update", product_id)
            raise ProductNotFoundError(product_id) from e
        logger.info("Updated product {}", product_id)
        return product

    def remove(self, product_id: int) -> Product:
        try:
            product = self._store.update_where(
                ProductFilter(id=product_id, available=True), {"available": False}
            )
        except NoRowsMatchedError as e:
            logger.warning("Product {} not found for removal", product_id)
            raise ProductNotFoundError(product_id) from e
        logger.info("Removed product {}", product_id)
        return product
