"""
Service-level checks for PageItemService that are awkward to reach
through HTTP.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlmodel import Session

from medilink.core.errors import NotFoundError, ValidationError
from medilink.models.medical import EmergencyContact, Medicine
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.services.page_item_service import PageItemService
from medilink.services.page_service import PageService


@pytest.fixture
def medicines() -> PageItemService[Medicine]:
    return PageItemService(
        PageItemRepository(Medicine),
        PageService(PageRepository()),
        label="Medicine",
    )


def test_equal_display_order_falls_back_to_created_at(
    session: Session, owner, medicines
):
    page = PageRepository().get_for_user(session, owner.id)
    now = datetime.now(timezone.utc)
    session.add(Medicine(page_id=page.id, name="later", display_order=0, created_at=now))
    session.add(
        Medicine(
            page_id=page.id,
            name="earlier",
            display_order=0,
            created_at=now - timedelta(hours=1),
        )
    )
    session.add(
        Medicine(page_id=page.id, name="last", display_order=1, created_at=now - timedelta(days=1))
    )
    session.commit()

    rows = medicines.list_items(session, owner.id)

    assert [row.name for row in rows] == ["earlier", "later", "last"]


def test_reorder_checks_run_before_page_lookup(session: Session, make_user, medicines):
    user = make_user()

    with pytest.raises(ValidationError):
        medicines.reorder(session, user.id, [])

    some_id = uuid.uuid4()
    with pytest.raises(ValidationError):
        medicines.reorder(session, user.id, [some_id, some_id])

    # well-formed list, but the user has no page yet
    with pytest.raises(NotFoundError):
        medicines.reorder(session, user.id, [some_id])


def test_unordered_collection_cannot_be_reordered(session: Session, owner):
    contacts = PageItemService(
        PageItemRepository(EmergencyContact, ordered=False),
        PageService(PageRepository()),
        label="Emergency contact",
    )

    with pytest.raises(ValidationError):
        contacts.reorder(session, owner.id, [owner.id])
