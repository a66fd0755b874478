import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """
    Persistent user profile for Medi Link.

    Identity:
      - id: MUST match the identity provider's user id (UUID from JWT "sub")

    This table is *not* responsible for passwords or OAuth accounts. The
    identity provider owns those. We only mirror identity, display name,
    the public username, and the admin flag.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        primary_key=True,
        index=True,
        description="Matches the identity provider's user id",
    )

    email: str = Field(
        max_length=255,
        unique=True,
        index=True,
        description="Email from the identity provider",
    )

    name: str = Field(
        max_length=100,
        description="Display name; first part of email by default",
    )

    # Public handle used in /u/<username> links; set once via /user/username
    username: str | None = Field(
        default=None,
        max_length=50,
        unique=True,
        index=True,
    )

    image: str | None = Field(
        default=None,
        description="Profile picture URL",
    )

    is_admin: bool = Field(
        default=False,
        index=True,
        description="Grants access to /admin routes",
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )
