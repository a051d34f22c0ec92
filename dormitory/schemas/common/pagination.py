# --- File: dormitory/schemas/common/pagination.py ---
"""
Pagination schemas for page-based list responses.
"""

from __future__ import annotations

from pydantic import Field, computed_field, field_validator

from dormitory.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dormitory.schemas.common.base import BaseSchema

__all__ = [
    "PaginationParams",
    "PaginationMeta",
]


class PaginationParams(BaseSchema):
    """Pagination query parameters."""

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 1 or v > MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
        return v

    @computed_field  # type: ignore[misc]
    @property
    def offset(self) -> int:
        """Offset for database queries."""
        return (self.page - 1) * self.limit


class PaginationMeta(BaseSchema):
    """Pagination metadata as returned by list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., serialization_alias="totalPages")

    @classmethod
    def create(cls, total: int, params: PaginationParams) -> "PaginationMeta":
        total_pages = (total + params.limit - 1) // params.limit if params.limit > 0 else 0
        return cls(page=params.page, limit=params.limit, total=total, total_pages=total_pages)

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
