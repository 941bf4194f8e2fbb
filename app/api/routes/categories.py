"""Category endpoints: public paged listing, admin create/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.pagination import page_request
from app.api.routes.auth import require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.catalog import CategoryCreate, CategoryOut
from app.schemas.common import MessageResponse
from app.schemas.pagination import PageRequest, PageResult
from app.services import categories

router = APIRouter()

CategoryId = Annotated[int, Path(ge=1)]


@router.post(
    "/admin/categories",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryOut:
    return categories.create_category(db, body)


@router.get("/public/categories", response_model=PageResult[CategoryOut])
def get_categories(
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[PageRequest, Depends(page_request(categories.DEFAULT_SORT))],
) -> PageResult[CategoryOut]:
    """Paged categories; sortBy is category_id or category_name."""
    return categories.get_categories(db, page)


@router.put("/admin/categories/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: CategoryId,
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryOut:
    return categories.update_category(db, category_id, body)


@router.delete("/admin/categories/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: CategoryId,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Delete a category and every product in it."""
    return MessageResponse(message=categories.delete_category(db, category_id))
