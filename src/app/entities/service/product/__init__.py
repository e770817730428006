"""Entity package: Product."""

from .entity import Product, ProductCreate, ProductUpdate
from .repository import ProductFilter, ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductFilter",
    "ProductRepository",
    "ProductTable",
]
