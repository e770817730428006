"""Pagination request and response models."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PaginationRequest(BaseModel):
    """Page selection: 1-based page number and page size."""

    page: int = Field(default=1, gt=0, description="1-based page number")
    limit: int = Field(default=10, gt=0, description="Page size")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    """Paging metadata; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total_products: int
    last_page: int


class PaginationResult(BaseModel, Generic[T]):
    """One page of items plus its metadata."""

    data: list[T] = Field(default_factory=list)
    meta: PaginationMeta

    @classmethod
    def create(
        cls, data: list[T], pagination: PaginationRequest, total: int
    ) -> "PaginationResult[T]":
        """Build a page, deriving ``last_page`` as ceil(total / limit)."""
        return cls(
            data=data,
            meta=PaginationMeta(
                page=pagination.page,
                limit=pagination.limit,
                total_products=total,
                last_page=math.ceil(total / pagination.limit),
            ),
        )
