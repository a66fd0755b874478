import uuid
from datetime import date, datetime

from sqlmodel import SQLModel, Field

from medilink.models.user import utcnow


class Medicine(SQLModel, table=True):
    """
    A medication listed on a page.

    display_order positions the row among its siblings on the same page.
    """

    __tablename__ = "medicines"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    page_id: uuid.UUID = Field(
        foreign_key="pages.id",
        ondelete="CASCADE",
        index=True,
    )

    name: str = Field(max_length=255)
    dosage: str | None = None
    frequency: str | None = None

    display_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )


class Allergy(SQLModel, table=True):
    """
    An allergy listed on a page.

    severity: mild | moderate | severe | life-threatening
    """

    __tablename__ = "allergies"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    page_id: uuid.UUID = Field(
        foreign_key="pages.id",
        ondelete="CASCADE",
        index=True,
    )

    name: str = Field(max_length=255)
    reaction: str | None = None
    severity: str = Field(default="mild", max_length=20)

    # True when the allergen is itself a drug
    is_medicine: bool = Field(default=False)

    display_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )


class Diagnosis(SQLModel, table=True):
    """
    A diagnosis listed on a page.

    severity: mild | moderate | severe | critical, or unset
    """

    __tablename__ = "diagnoses"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    page_id: uuid.UUID = Field(
        foreign_key="pages.id",
        ondelete="CASCADE",
        index=True,
    )

    name: str = Field(max_length=255)
    severity: str | None = Field(default=None, max_length=20)
    diagnosis_date: date | None = None
    description: str | None = None

    display_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )


class EmergencyContact(SQLModel, table=True):
    """
    Someone to call in an emergency. Unordered; listed by creation time.
    """

    __tablename__ = "emergency_contacts"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    page_id: uuid.UUID = Field(
        foreign_key="pages.id",
        ondelete="CASCADE",
        index=True,
    )

    name: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=255)
    relation: str | None = Field(default=None, max_length=100)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow},
    )
