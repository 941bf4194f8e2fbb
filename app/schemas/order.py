"""Pydantic schemas for orders, line items and payments."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Status set on every freshly placed order.
ORDER_ACCEPTED_STATUS = "Order Accepted !"

MAX_ORDER_LINES = 100


class OrderLine(BaseModel):
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1, le=10_000)


class PlaceOrderRequest(BaseModel):
    """Products and quantities to buy, and how the order is paid."""

    items: list[OrderLine] = Field(..., max_length=MAX_ORDER_LINES)
    payment_method: str = Field(..., min_length=1, max_length=64)


class OrderStatusUpdate(BaseModel):
    order_status: str = Field(..., min_length=1, max_length=64)


class OrderItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_item_id: int = Field(..., validation_alias=AliasChoices("id", "order_item_id"))
    product_id: int | None
    product_name: str
    quantity: int
    discount: float
    ordered_product_price: float


class PaymentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    payment_id: int = Field(..., validation_alias=AliasChoices("id", "payment_id"))
    payment_method: str


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: int = Field(..., validation_alias=AliasChoices("id", "order_id"))
    email: str
    order_date: datetime
    total_amount: float
    order_status: str
    items: list[OrderItemOut] = Field(default_factory=list)
    payment: PaymentOut | None = None
