import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field

from medilink.models.user import utcnow


class Page(SQLModel, table=True):
    """
    A user's public medical-information profile.

    One page per user (user_id is unique). Every medicine, allergy,
    diagnosis and emergency contact hangs off a page and is removed with it.
    """

    __tablename__ = "pages"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        ondelete="CASCADE",
        unique=True,
        index=True,
    )

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    description: str | None = None

    # Private pages are only reachable through unique_key, not username
    is_private: bool = Field(default=False)

    # light | dark | neobrutalism
    color_mode: str = Field(default="light", max_length=20)

    # "#RRGGBB"
    primary_color: str | None = Field(default=None, max_length=7)

    unique_key: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        max_length=36,
        unique=True,
        index=True,
        description="Unguessable key for sharing private pages",
    )

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )
