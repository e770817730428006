"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Query, Request
from sqlmodel import Session

from src.app.api.http.app_data import ApplicationDependencies
from src.app.core.models.pagination import PaginationRequest
from src.app.core.services import DbSessionService, ProductService
from src.app.entities.service.product import ProductRepository
from src.app.runtime.context import get_config


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session, committed when the request succeeds."""
    with database_service.session_scope() as session:
        yield session


def get_product_repository(db: Session = Depends(get_db_session)) -> ProductRepository:
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)


def get_pagination(
    page: int = Query(default=1, gt=0, description="1-based page number"),
    limit: int | None = Query(default=None, gt=0, description="Page size"),
) -> PaginationRequest:
    """Build a PaginationRequest from query parameters, bounded by configuration."""
    pagination_config = get_config().pagination
    if limit is None:
        limit = pagination_config.default_limit
    if limit > pagination_config.max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit must not exceed {pagination_config.max_limit}",
        )
    return PaginationRequest(page=page, limit=limit)
