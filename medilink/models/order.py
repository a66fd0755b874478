import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field

from medilink.models.user import utcnow


class Order(SQLModel, table=True):
    """
    Customer order.

    Rows are written by the payment flow; this service reads them and
    lets admins move the status along.
    """

    __tablename__ = "orders"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        ondelete="CASCADE",
        index=True,
    )

    total_amount: float = Field(
        ge=0,
        description="Final amount charged for this order",
    )

    currency: str = Field(default="usd", max_length=3)

    # pending | processing | completed | shipped | delivered | cancelled
    status: str = Field(
        default="pending",
        index=True,
        description="Order status lifecycle",
    )

    shipping_address_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="user_addresses.id",
        ondelete="SET NULL",
    )

    tracking_number: str | None = Field(default=None, max_length=255)
    notes: str | None = None

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )


class OrderItem(SQLModel, table=True):
    """
    Line item inside an order, with the product price captured at
    purchase time.
    """

    __tablename__ = "order_items"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    order_id: uuid.UUID = Field(
        foreign_key="orders.id",
        ondelete="CASCADE",
        index=True,
    )

    product_id: uuid.UUID = Field(
        foreign_key="products.id",
        index=True,
    )

    quantity: int = Field(
        gt=0,
        description="Quantity ordered (>=1)",
    )

    unit_price: float = Field(
        description="Unit price at time of order",
    )

    total_price: float = Field(
        description="quantity * unit_price",
    )
