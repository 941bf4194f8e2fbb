"""Generic paginated listing: filter, count, sort with a stable tiebreak, slice.

One ListingEngine is built per entity kind (categories, products, orders) with
the columns clients may sort by. Rows are converted to response schemas by the
engine so callers get a ready-to-return PageResult.
"""

import math
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidSortFieldError
from app.schemas.pagination import PageRequest, PageResult

T = TypeVar("T")


def page_metadata(page_number: int, page_size: int, total_elements: int) -> tuple[int, bool]:
    """
    Return (total_pages, last_page) for a page of a result set.

    last_page is True only on the final page index, or when there are no
    results at all; a page_number past the end is not the last page.
    """
    total_pages = math.ceil(total_elements / page_size) if total_elements else 0
    last_page = total_elements == 0 or page_number == total_pages - 1
    return total_pages, last_page


class ListingEngine(Generic[T]):
    """Paged, sorted listing over one ORM model."""

    def __init__(
        self,
        model: Any,
        sort_fields: Mapping[str, Any],
        to_schema: Callable[[Any], T],
        tiebreak: Any = None,
    ):
        if not sort_fields:
            raise ValueError("sort_fields must name at least one column")
        self.model = model
        self.sort_fields = dict(sort_fields)
        self.to_schema = to_schema
        self.tiebreak = tiebreak if tiebreak is not None else model.id

    @property
    def allowed_sort_fields(self) -> list[str]:
        return sorted(self.sort_fields)

    def sort_column(self, sort_by: str) -> Any:
        """Resolve a client-facing sort field to its column or raise InvalidSortFieldError."""
        column = self.sort_fields.get(sort_by)
        if column is None:
            raise InvalidSortFieldError(sort_by, self.allowed_sort_fields)
        return column

    def list(self, db: Session, page: PageRequest, *filters: Any) -> PageResult[T]:
        """
        Return one page of rows matching all filters.

        Filters apply before counting, so total_elements reflects the filtered
        set. Ordering is sort_by in sort_order, then primary key ascending so
        repeated calls with the same input return the same rows.
        """
        column = self.sort_column(page.sort_by)
        ordering = column.desc() if page.sort_order == "desc" else column.asc()

        query = db.query(self.model)
        if filters:
            query = query.filter(*filters)
        total_elements = query.order_by(None).count()

        rows = (
            query.order_by(ordering, self.tiebreak.asc())
            .offset(page.offset)
            .limit(page.page_size)
            .all()
        )
        total_pages, last_page = page_metadata(page.page_number, page.page_size, total_elements)
        return PageResult(
            content=[self.to_schema(row) for row in rows],
            page_number=page.page_number,
            page_size=page.page_size,
            total_elements=total_elements,
            total_pages=total_pages,
            last_page=last_page,
        )
