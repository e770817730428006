"""Shared request and response models."""

from .pagination import PaginationMeta, PaginationRequest, PaginationResult

__all__ = ["PaginationMeta", "PaginationRequest", "PaginationResult"]
