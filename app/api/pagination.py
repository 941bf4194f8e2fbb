"""Query-parameter parsing for paged listing endpoints.

Clients send pageNumber, pageSize, sortBy and sortOrder; each listing endpoint
gets its own dependency so the default sortBy matches the entity.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import HTTPException, Query, status

from app.core.config import get_settings
from app.core.exceptions import InvalidSortOrderError
from app.schemas.pagination import PageRequest

SORT_ORDERS = frozenset({"asc", "desc"})


def _validate_page_size(page_size: int) -> None:
    max_size = get_settings().MAX_PAGE_SIZE
    if page_size > max_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"pageSize must be at most {max_size}.",
        )


def _normalize_sort_order(sort_order: str) -> str:
    normalized = sort_order.strip().lower()
    if normalized not in SORT_ORDERS:
        raise InvalidSortOrderError(sort_order)
    return normalized


def page_request(default_sort: str) -> Callable[..., PageRequest]:
    """Build a dependency that parses listing query parameters into a PageRequest."""

    def dependency(
        page_number: Annotated[int, Query(alias="pageNumber", ge=0)] = 0,
        page_size: Annotated[int | None, Query(alias="pageSize", ge=1)] = None,
        sort_by: Annotated[str, Query(alias="sortBy", min_length=1, max_length=64)] = default_sort,
        sort_order: Annotated[str, Query(alias="sortOrder", max_length=8)] = "asc",
    ) -> PageRequest:
        size = page_size if page_size is not None else get_settings().DEFAULT_PAGE_SIZE
        _validate_page_size(size)
        return PageRequest(
            page_number=page_number,
            page_size=size,
            sort_by=sort_by.strip(),
            sort_order=_normalize_sort_order(sort_order),
        )

    return dependency
