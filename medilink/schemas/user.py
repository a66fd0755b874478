import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]{3,50}")


class UserRead(SQLModel):
    """Response schema returned to clients."""

    id: uuid.UUID
    email: str
    name: str
    username: str | None
    image: str | None
    is_admin: bool
    created_at: datetime


class UsernameRead(SQLModel):
    username: str | None
    has_username: bool


class UsernameSet(SQLModel):
    """
    Payload for claiming a public username.

    Format is checked in the service so the error message can spell
    out the rule.
    """

    model_config = ConfigDict(extra="forbid")

    username: str


class AdminUserUpdate(BaseModel):
    """
    Admin-only partial update. Omitted fields are left unchanged.

    Accepts isAdmin as well as is_admin.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    username: str | None = None
    is_admin: bool | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not USERNAME_PATTERN.fullmatch(v):
            raise ValueError(
                "username must be 3-50 characters of letters, numbers, "
                "underscores and hyphens"
            )
        return v
