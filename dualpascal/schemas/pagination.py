from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Standard paginated response model"""

    items: list[T]
    total: int = Field(..., description="Total number of matching items")
    page: int = Field(..., description="Current 1-indexed page")
    per_page: int = Field(..., description="Items per page")
    total_pages: int
    has_next: bool
    has_previous: bool
    filters: dict[str, Any] = Field(default_factory=dict, description="Filters applied to the listing")
