"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .product.product_service import ProductService, ProductStore

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ProductService",
    "ProductStore",
]
