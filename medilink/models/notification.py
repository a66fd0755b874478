import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field

from medilink.models.user import utcnow


class Notification(SQLModel, table=True):
    """
    Per-user message. Append-only except for the is_read flag.

    type: order_update | subscription_update | system
    """

    __tablename__ = "notifications"

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

    type: str = Field(max_length=50)
    title: str = Field(max_length=255)
    message: str

    related_order_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="orders.id",
        ondelete="SET NULL",
    )

    is_read: bool = Field(default=False, index=True)

    created_at: datetime = Field(
        default_factory=utcnow,
        index=True,
    )
