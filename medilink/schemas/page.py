import re
import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator
from sqlmodel import SQLModel

from medilink.schemas.medical import (
    AllergyRead,
    DiagnosisRead,
    EmergencyContactRead,
    MedicineRead,
    WRITE_CONFIG,
)

COLOR_MODES = ("light", "dark", "neobrutalism")

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class PageUpdate(BaseModel):
    """
    Page settings editable by the owner.

    Blank strings are stored as null. An unknown color_mode falls back
    to "light"; a malformed primary_color is rejected.
    """

    model_config = WRITE_CONFIG

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    description: str | None = None
    is_private: bool | None = None
    color_mode: str | None = None
    primary_color: str | None = None

    @field_validator(
        "first_name",
        "last_name",
        "email",
        "phone",
        "description",
        "primary_color",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("color_mode", mode="before")
    @classmethod
    def coerce_color_mode(cls, v: Any) -> str | None:
        if v is None:
            return None
        if isinstance(v, str) and v in COLOR_MODES:
            return v
        return "light"

    @field_validator("primary_color")
    @classmethod
    def check_primary_color(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not _HEX_COLOR.fullmatch(v):
            raise ValueError("primary_color must look like #RRGGBB")
        return v.lower()


class PageRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    first_name: str | None
    last_name: str | None
    email: str | None
    phone: str | None
    description: str | None
    is_private: bool
    color_mode: str
    primary_color: str | None
    unique_key: str
    created_at: datetime
    updated_at: datetime


class PublicPageRead(SQLModel):
    """
    Everything the public profile view needs in one payload.
    """

    page: PageRead
    username: str | None
    user_name: str | None
    user_image: str | None
    medicines: list[MedicineRead]
    allergies: list[AllergyRead]
    diagnoses: list[DiagnosisRead]
    contacts: list[EmergencyContactRead]
