from .product_service import ProductService, ProductStore

__all__ = ["ProductService", "ProductStore"]
