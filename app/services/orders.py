"""Placing orders, owner lookups, status updates and the paged admin listing."""

import logging

from sqlalchemy.orm import Session

from app.core.exceptions import OrderError, ResourceNotFoundError
from app.models import Order, OrderItem, Payment, Product
from app.schemas.order import ORDER_ACCEPTED_STATUS, OrderLine, OrderOut
from app.schemas.pagination import PageRequest, PageResult
from app.services.pagination import ListingEngine

logger = logging.getLogger(__name__)

DEFAULT_SORT = "total_amount"

ORDER_LISTING: ListingEngine[OrderOut] = ListingEngine(
    Order,
    sort_fields={
        "order_id": Order.id,
        "email": Order.email,
        "order_date": Order.order_date,
        "total_amount": Order.total_amount,
        "order_status": Order.order_status,
    },
    to_schema=OrderOut.model_validate,
)


def _merge_lines(items: list[OrderLine]) -> dict[int, int]:
    """Collapse repeated product ids into one quantity, keeping first-seen order."""
    merged: dict[int, int] = {}
    for line in items:
        merged[line.product_id] = merged.get(line.product_id, 0) + line.quantity
    return merged


def place_order(
    db: Session, email: str, items: list[OrderLine], payment_method: str
) -> OrderOut:
    """
    Create an order for email from (product_id, quantity) lines.

    Each line is priced at the product's current special_price and the stock
    is decremented. Nothing is written unless every line can be fulfilled.
    """
    if not items:
        raise OrderError("Cannot place an order without items.")

    order = Order(email=email, order_status=ORDER_ACCEPTED_STATUS, total_amount=0.0)
    total = 0.0
    for product_id, quantity in _merge_lines(items).items():
        product = db.get(Product, product_id)
        if product is None:
            db.rollback()
            raise ResourceNotFoundError("Product", "product_id", product_id)
        if product.quantity < quantity:
            db.rollback()
            raise OrderError(
                f"Only {product.quantity} of '{product.product_name}' left in stock.",
                details={"product_id": product_id, "available": product.quantity},
            )
        product.quantity -= quantity
        order.items.append(
            OrderItem(
                product_id=product.id,
                product_name=product.product_name,
                quantity=quantity,
                discount=product.discount,
                ordered_product_price=product.special_price,
            )
        )
        total += product.special_price * quantity

    order.total_amount = round(total, 2)
    order.payment = Payment(payment_method=payment_method.strip())
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Placed order id=%s total=%s", order.id, order.total_amount)
    return OrderOut.model_validate(order)


def _get_owned_or_404(db: Session, email: str, order_id: int) -> Order:
    order = db.query(Order).filter(Order.email == email, Order.id == order_id).first()
    if order is None:
        raise ResourceNotFoundError("Order", "order_id", order_id)
    return order


def get_order(db: Session, email: str, order_id: int) -> OrderOut:
    return OrderOut.model_validate(_get_owned_or_404(db, email, order_id))


def get_orders_by_user(db: Session, email: str) -> list[OrderOut]:
    orders = db.query(Order).filter(Order.email == email).order_by(Order.id).all()
    if not orders:
        raise ResourceNotFoundError("Order", "email", email)
    return [OrderOut.model_validate(o) for o in orders]


def get_all_orders(db: Session, page: PageRequest) -> PageResult[OrderOut]:
    return ORDER_LISTING.list(db, page)


def update_order(db: Session, email: str, order_id: int, order_status: str) -> OrderOut:
    order = _get_owned_or_404(db, email, order_id)
    order.order_status = order_status.strip()
    db.commit()
    db.refresh(order)
    logger.info("Order id=%s status set to %r", order_id, order.order_status)
    return OrderOut.model_validate(order)
