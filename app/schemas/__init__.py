"""Pydantic request/response schemas."""

from app.schemas.address import AddressIn, AddressOut
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserProfile,
)
from app.schemas.catalog import CategoryCreate, CategoryOut, ProductCreate, ProductOut, ProductUpdate
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.order import OrderLine, OrderOut, OrderStatusUpdate, PlaceOrderRequest
from app.schemas.pagination import PageRequest, PageResult

__all__ = [
    "AddressIn",
    "AddressOut",
    "CategoryCreate",
    "CategoryOut",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "OrderLine",
    "OrderOut",
    "OrderStatusUpdate",
    "PageRequest",
    "PageResult",
    "PlaceOrderRequest",
    "ProductCreate",
    "ProductOut",
    "ProductUpdate",
    "RegisterRequest",
    "TokenResponse",
    "UserProfile",
]
