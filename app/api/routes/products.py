"""Product endpoints: public listing and search, admin create/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.pagination import page_request
from app.api.routes.auth import require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.catalog import ProductCreate, ProductOut, ProductUpdate
from app.schemas.common import MessageResponse
from app.schemas.pagination import PageRequest, PageResult
from app.services import products

router = APIRouter()

ProductPage = Annotated[PageRequest, Depends(page_request(products.DEFAULT_SORT))]


@router.post(
    "/admin/categories/{category_id}/products",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    category_id: Annotated[int, Path(ge=1)],
    body: ProductCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductOut:
    """Add a product to a category; special_price is derived from price and discount."""
    return products.add_product(db, category_id, body)


@router.get("/public/products", response_model=PageResult[ProductOut])
def get_all_products(
    db: Annotated[Session, Depends(get_db)],
    page: ProductPage,
) -> PageResult[ProductOut]:
    return products.get_all_products(db, page)


@router.get("/public/categories/{category_id}/products", response_model=PageResult[ProductOut])
def get_products_by_category(
    category_id: Annotated[int, Path(ge=1)],
    db: Annotated[Session, Depends(get_db)],
    page: ProductPage,
) -> PageResult[ProductOut]:
    return products.search_by_category(db, category_id, page)


@router.get("/public/products/keyword/{keyword}", response_model=PageResult[ProductOut])
def get_products_by_keyword(
    keyword: Annotated[str, Path(min_length=1, max_length=255)],
    db: Annotated[Session, Depends(get_db)],
    page: ProductPage,
) -> PageResult[ProductOut]:
    """Products whose name contains keyword, ignoring case."""
    return products.search_by_keyword(db, keyword, page)


@router.put("/admin/products/{product_id}", response_model=ProductOut)
def update_product(
    product_id: Annotated[int, Path(ge=1)],
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductOut:
    return products.update_product(db, product_id, body)


@router.delete("/admin/products/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: Annotated[int, Path(ge=1)],
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message=products.delete_product(db, product_id))
