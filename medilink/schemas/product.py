import uuid
from datetime import datetime

from sqlmodel import SQLModel


class ProductRead(SQLModel):
    """Product as shown in the shop."""

    id: uuid.UUID
    name: str
    description: str | None
    price: float
    currency: str
    is_active: bool
    image_url: str | None
    created_at: datetime
