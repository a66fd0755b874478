import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field

from medilink.models.user import utcnow


class Product(SQLModel, table=True):
    """
    Shop catalog entry (e.g. NFC cards and bracelets linking to a page).
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=255,
        index=True,
        description="Display name of the product",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    price: float = Field(
        gt=0,
        description="Unit price in `currency`",
    )

    currency: str = Field(default="usd", max_length=3)

    is_active: bool = Field(
        default=True,
        index=True,
        description="Whether this product is visible in the shop",
    )

    image_url: str | None = Field(
        default=None,
        description="Main product image URL",
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )
