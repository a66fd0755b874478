import uuid
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

ALLERGY_SEVERITIES = ("mild", "moderate", "severe", "life-threatening")
DIAGNOSIS_SEVERITIES = ("mild", "moderate", "severe", "critical")

# Write payloads take the dashboard's camelCase keys (isMedicine,
# diagnosisDate) as well as the snake_case field names.
WRITE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


def _required_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty")
    return v


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


# -------- Medicines --------


class MedicineWrite(BaseModel):
    """
    Create/update payload for a medicine.

    Unknown keys (e.g. display_order) are ignored; ordering is only
    changed through the reorder endpoint.
    """

    model_config = WRITE_CONFIG

    name: str
    dosage: str | None = None
    frequency: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _required_name(v)

    @field_validator("dosage", "frequency", mode="before")
    @classmethod
    def normalize_optional(cls, v: Any) -> Any:
        return _blank_to_none(v)


class MedicineRead(SQLModel):
    id: uuid.UUID
    page_id: uuid.UUID
    name: str
    dosage: str | None
    frequency: str | None
    display_order: int
    created_at: datetime
    updated_at: datetime


# -------- Allergies --------


class AllergyWrite(BaseModel):
    """
    Create/update payload for an allergy.

    severity outside ALLERGY_SEVERITIES falls back to "mild";
    is_medicine is only true when the client sends literal `true`.
    """

    model_config = WRITE_CONFIG

    name: str
    reaction: str | None = None
    severity: str = "mild"
    is_medicine: bool = False

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _required_name(v)

    @field_validator("reaction", mode="before")
    @classmethod
    def normalize_reaction(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("severity", mode="before")
    @classmethod
    def coerce_severity(cls, v: Any) -> str:
        if isinstance(v, str) and v in ALLERGY_SEVERITIES:
            return v
        return "mild"

    @field_validator("is_medicine", mode="before")
    @classmethod
    def coerce_is_medicine(cls, v: Any) -> bool:
        return v is True


class AllergyRead(SQLModel):
    id: uuid.UUID
    page_id: uuid.UUID
    name: str
    reaction: str | None
    severity: str
    is_medicine: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


# -------- Diagnoses --------


class DiagnosisWrite(BaseModel):
    """
    Create/update payload for a diagnosis.

    severity outside DIAGNOSIS_SEVERITIES is stored as null.
    """

    model_config = WRITE_CONFIG

    name: str
    severity: str | None = None
    diagnosis_date: date | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _required_name(v)

    @field_validator("severity", mode="before")
    @classmethod
    def coerce_severity(cls, v: Any) -> str | None:
        if isinstance(v, str) and v in DIAGNOSIS_SEVERITIES:
            return v
        return None

    @field_validator("diagnosis_date", "description", mode="before")
    @classmethod
    def normalize_optional(cls, v: Any) -> Any:
        return _blank_to_none(v)


class DiagnosisRead(SQLModel):
    id: uuid.UUID
    page_id: uuid.UUID
    name: str
    severity: str | None
    diagnosis_date: date | None
    description: str | None
    display_order: int
    created_at: datetime
    updated_at: datetime


# -------- Emergency contacts --------


class EmergencyContactWrite(BaseModel):
    model_config = WRITE_CONFIG

    name: str
    phone: str | None = None
    email: str | None = None
    relation: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _required_name(v)

    @field_validator("phone", "email", "relation", mode="before")
    @classmethod
    def normalize_optional(cls, v: Any) -> Any:
        return _blank_to_none(v)


class EmergencyContactRead(SQLModel):
    id: uuid.UUID
    page_id: uuid.UUID
    name: str
    phone: str | None
    email: str | None
    relation: str | None
    created_at: datetime
    updated_at: datetime


# -------- Reorder payloads --------
# The dashboard sends camelCase keys; the snake_case field names work too.


class MedicineReorder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    medicine_ids: list[uuid.UUID] = Field(alias="medicineIds", min_length=1)


class AllergyReorder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    allergy_ids: list[uuid.UUID] = Field(alias="allergyIds", min_length=1)


class DiagnosisReorder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    diagnosis_ids: list[uuid.UUID] = Field(alias="diagnosisIds", min_length=1)


class SuccessResponse(SQLModel):
    success: bool = True
