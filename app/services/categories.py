"""Category CRUD and paged listing."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Category
from app.schemas.catalog import CategoryCreate, CategoryOut
from app.schemas.pagination import PageRequest, PageResult
from app.services.pagination import ListingEngine

logger = logging.getLogger(__name__)

DEFAULT_SORT = "category_id"

CATEGORY_LISTING: ListingEngine[CategoryOut] = ListingEngine(
    Category,
    sort_fields={
        "category_id": Category.id,
        "category_name": Category.category_name,
    },
    to_schema=CategoryOut.model_validate,
)


def _get_or_404(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise ResourceNotFoundError("Category", "category_id", category_id)
    return category


def _ensure_name_free(db: Session, name: str, exclude_id: int | None = None) -> None:
    query = db.query(Category).filter(func.lower(Category.category_name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first() is not None:
        raise DuplicateResourceError(
            f"Category with the name '{name}' already exists.",
            details={"category_name": name},
        )


def _commit_or_duplicate(db: Session, name: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateResourceError(
            f"Category with the name '{name}' already exists.",
            details={"category_name": name},
        ) from e


def create_category(db: Session, body: CategoryCreate) -> CategoryOut:
    _ensure_name_free(db, body.category_name)
    category = Category(category_name=body.category_name)
    db.add(category)
    _commit_or_duplicate(db, body.category_name)
    db.refresh(category)
    logger.info("Created category id=%s", category.id)
    return CategoryOut.model_validate(category)


def get_categories(db: Session, page: PageRequest) -> PageResult[CategoryOut]:
    return CATEGORY_LISTING.list(db, page)


def update_category(db: Session, category_id: int, body: CategoryCreate) -> CategoryOut:
    category = _get_or_404(db, category_id)
    _ensure_name_free(db, body.category_name, exclude_id=category_id)
    category.category_name = body.category_name
    _commit_or_duplicate(db, body.category_name)
    db.refresh(category)
    return CategoryOut.model_validate(category)


def delete_category(db: Session, category_id: int) -> str:
    """Delete the category together with all of its products."""
    category = _get_or_404(db, category_id)
    product_count = len(category.products)
    db.delete(category)
    db.commit()
    logger.info("Deleted category id=%s with %s products", category_id, product_count)
    return f"Category with category_id: {category_id} deleted successfully."
