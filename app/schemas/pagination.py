"""Pydantic schemas for paginated listings: the request and the page envelope."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


class PageRequest(BaseModel):
    """Which page to return and how to order the rows before slicing."""

    page_number: int = Field(default=0, ge=0, description="Zero-based page index.")
    page_size: int = Field(default=10, gt=0, description="Rows per page.")
    sort_by: str = Field(..., min_length=1, description="Field to sort by.")
    sort_order: SortOrder = Field(default="asc", description="asc or desc.")

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class PageResult(BaseModel, Generic[T]):
    """One page of results plus pagination metadata."""

    content: list[T] = Field(default_factory=list)
    page_number: int = Field(..., ge=0)
    page_size: int = Field(..., gt=0)
    total_elements: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    last_page: bool = Field(
        ...,
        description="True on the final page, or when there are no results at all.",
    )
