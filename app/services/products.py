"""Product CRUD, paged listing, and search by category or keyword."""

import logging

from sqlalchemy import false, func
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Category, Product
from app.schemas.catalog import ProductCreate, ProductOut, ProductUpdate
from app.schemas.pagination import PageRequest, PageResult
from app.services.pagination import ListingEngine

logger = logging.getLogger(__name__)

DEFAULT_SORT = "product_id"

PRODUCT_LISTING: ListingEngine[ProductOut] = ListingEngine(
    Product,
    sort_fields={
        "product_id": Product.id,
        "product_name": Product.product_name,
        "price": Product.price,
        "special_price": Product.special_price,
        "quantity": Product.quantity,
        "discount": Product.discount,
    },
    to_schema=ProductOut.model_validate,
)


def compute_special_price(price: float, discount: float) -> float:
    """Price after a percentage discount, rounded to cents."""
    return round(price - (discount * 0.01) * price, 2)


def _get_category_or_404(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise ResourceNotFoundError("Category", "category_id", category_id)
    return category


def _get_or_404(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise ResourceNotFoundError("Product", "product_id", product_id)
    return product


def _ensure_name_free(
    db: Session, category_id: int, name: str, exclude_id: int | None = None
) -> None:
    query = db.query(Product).filter(
        Product.category_id == category_id,
        func.lower(Product.product_name) == name.lower(),
    )
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    if query.first() is not None:
        raise DuplicateResourceError(
            f"Product '{name}' already exists in category {category_id}.",
            details={"product_name": name, "category_id": category_id},
        )


def add_product(db: Session, category_id: int, body: ProductCreate) -> ProductOut:
    category = _get_category_or_404(db, category_id)
    _ensure_name_free(db, category.id, body.product_name)
    product = Product(
        **body.model_dump(),
        special_price=compute_special_price(body.price, body.discount),
        category_id=category.id,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Added product id=%s to category id=%s", product.id, category.id)
    return ProductOut.model_validate(product)


def get_all_products(db: Session, page: PageRequest) -> PageResult[ProductOut]:
    return PRODUCT_LISTING.list(db, page)


def search_by_category(
    db: Session, category_id: int, page: PageRequest
) -> PageResult[ProductOut]:
    category = _get_category_or_404(db, category_id)
    return PRODUCT_LISTING.list(db, page, Product.category_id == category.id)


def search_by_keyword(db: Session, keyword: str, page: PageRequest) -> PageResult[ProductOut]:
    """Case-insensitive substring match on product name. A blank keyword matches nothing."""
    keyword = keyword.strip()
    if not keyword:
        return PRODUCT_LISTING.list(db, page, false())
    # Escape LIKE wildcards so the keyword is matched literally.
    escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return PRODUCT_LISTING.list(
        db, page, Product.product_name.ilike(f"%{escaped}%", escape="\\")
    )


def update_product(db: Session, product_id: int, body: ProductUpdate) -> ProductOut:
    product = _get_or_404(db, product_id)
    _ensure_name_free(db, product.category_id, body.product_name, exclude_id=product.id)
    for field, value in body.model_dump().items():
        setattr(product, field, value)
    product.special_price = compute_special_price(body.price, body.discount)
    db.commit()
    db.refresh(product)
    return ProductOut.model_validate(product)


def delete_product(db: Session, product_id: int) -> str:
    product = _get_or_404(db, product_id)
    db.delete(product)
    db.commit()
    logger.info("Deleted product id=%s", product_id)
    return f"Product with product_id: {product_id} deleted successfully."
