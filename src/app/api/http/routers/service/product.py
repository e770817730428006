"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.app.api.http.deps import get_pagination, get_product_service
from src.app.core.exceptions import ProductNotFoundError
from src.app.core.models.pagination import PaginationRequest, PaginationResult
from src.app.core.services import ProductService
from src.app.entities.service.product import Product, ProductCreate, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])


def _not_found(exc: ProductNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    return service.create(product_in)


@router.get("", response_model=PaginationResult[Product])
def list_products(
    pagination: PaginationRequest = Depends(get_pagination),
    service: ProductService = Depends(get_product_service),
) -> PaginationResult[Product]:
    """List available products, one page at a time."""
    return service.find_all(pagination)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get an available product by ID."""
    try:
        return service.find_one(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e) from e


@router.patch("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    patch: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update selected fields of a product, removed or not."""
    try:
        return service.update(product_id, patch)
    except ProductNotFoundError as e:
        raise _not_found(e) from e


@router.delete("/{product_id}", response_model=Product)
def remove_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Soft-delete a product by marking it unavailable."""
    try:
        return service.remove(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e) from e
