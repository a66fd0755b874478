import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator
from sqlmodel import SQLModel

from medilink.schemas.medical import WRITE_CONFIG

_REQUIRED = ("address_line1", "city", "state", "postal_code", "country")


def _strip(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip()
    return v


class AddressCreate(BaseModel):
    """
    New address. addressLine2 is optional; the other lines are required
    and may not be blank.
    """

    model_config = WRITE_CONFIG

    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool = False

    @field_validator(*_REQUIRED)
    @classmethod
    def require_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Missing required fields")
        return v

    @field_validator("address_line2", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        v = _strip(v)
        return v or None


class AddressUpdate(BaseModel):
    """
    Partial update. Omitted or blank required lines keep their current
    value; addressLine2 is replaced whenever it is sent.
    """

    model_config = WRITE_CONFIG

    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_default: bool | None = None

    @field_validator(*_REQUIRED, "address_line2", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        v = _strip(v)
        return v or None


class AddressRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    address_line1: str
    address_line2: str | None
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool
    created_at: datetime
    updated_at: datetime


class AddressList(SQLModel):
    addresses: list[AddressRead]
