"""SQLAlchemy ORM models."""

from app.models.address import Address
from app.models.base import Base
from app.models.catalog import Category, Product
from app.models.order import Order, OrderItem, Payment
from app.models.user import User

__all__ = [
    "Address",
    "Base",
    "Category",
    "Order",
    "OrderItem",
    "Payment",
    "Product",
    "User",
]
