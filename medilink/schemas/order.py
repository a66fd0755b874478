import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import SQLModel

OrderStatus = Literal[
    "pending",
    "processing",
    "completed",
    "shipped",
    "delivered",
    "cancelled",
]


class OrderItemRead(SQLModel):
    """
    Representation of a single order line item.
    """

    id: uuid.UUID
    order_id: uuid.UUID
    product_id: uuid.UUID
    product_name: str | None
    quantity: int
    unit_price: float
    total_price: float


class OrderRead(SQLModel):
    """
    Order with its line items.
    """

    id: uuid.UUID
    user_id: uuid.UUID
    total_amount: float
    currency: str
    status: OrderStatus
    tracking_number: str | None
    shipping_address_id: uuid.UUID | None
    notes: str | None
    created_at: datetime
    items: list[OrderItemRead]


class OrderOwner(SQLModel):
    id: uuid.UUID
    name: str
    email: str


class AdminOrderRead(OrderRead):
    """
    Admin view: the order plus who placed it.
    """

    user: OrderOwner


class AdminOrderUpdate(BaseModel):
    """
    Admin PATCH body. Keys follow the dashboard's camelCase.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    order_id: uuid.UUID = Field(alias="orderId")
    status: OrderStatus | None = None
    tracking_number: str | None = Field(default=None, alias="trackingNumber")
    notes: str | None = None
