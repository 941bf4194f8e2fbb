"""Order endpoints: customers place and view their own orders; admins list and update all."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.pagination import page_request
from app.api.routes.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.order import OrderOut, OrderStatusUpdate, PlaceOrderRequest
from app.schemas.pagination import PageRequest, PageResult
from app.services import orders

router = APIRouter()

OrderId = Annotated[int, Path(ge=1)]


@router.post("/users/me/orders", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def place_order(
    body: PlaceOrderRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> OrderOut:
    """
    Place an order for the authenticated user.

    Every line is priced at the product's special price and taken out of stock.
    Fails with 400 if any product does not have enough stock, 404 if a product
    does not exist; in both cases nothing is changed.
    """
    return orders.place_order(db, user.email, body.items, body.payment_method)


@router.get("/users/me/orders", response_model=list[OrderOut])
def get_my_orders(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[OrderOut]:
    return orders.get_orders_by_user(db, user.email)


@router.get("/users/me/orders/{order_id}", response_model=OrderOut)
def get_my_order(
    order_id: OrderId,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> OrderOut:
    return orders.get_order(db, user.email, order_id)


@router.get("/admin/orders", response_model=PageResult[OrderOut])
def get_all_orders(
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[PageRequest, Depends(page_request(orders.DEFAULT_SORT))],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> PageResult[OrderOut]:
    return orders.get_all_orders(db, page)


@router.put("/admin/users/{email}/orders/{order_id}", response_model=OrderOut)
def update_order(
    email: Annotated[str, Path(min_length=3, max_length=255)],
    order_id: OrderId,
    body: OrderStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> OrderOut:
    return orders.update_order(db, email.strip().lower(), order_id, body.order_status)
