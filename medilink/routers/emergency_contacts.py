import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.medical import EmergencyContact
from medilink.models.user import User
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.medical import (
    EmergencyContactRead,
    EmergencyContactWrite,
    SuccessResponse,
)
from medilink.services.page_item_service import PageItemService
from medilink.services.page_service import PageService

router = APIRouter(prefix="/page/emergency-contacts", tags=["Emergency Contacts"])

service = PageItemService(
    PageItemRepository(EmergencyContact, ordered=False),
    PageService(PageRepository()),
    label="Emergency contact",
)


@router.get("", response_model=list[EmergencyContactRead])
def list_contacts(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    List the caller's emergency contacts, oldest first.
    """
    return service.list_items(session, current_user.id)


@router.post(
    "",
    response_model=EmergencyContactRead,
    status_code=status.HTTP_201_CREATED,
)
def create_contact(
    payload: EmergencyContactWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.create_item(session, current_user.id, payload)


@router.put("/{contact_id}", response_model=EmergencyContactRead)
def update_contact(
    contact_id: uuid.UUID,
    payload: EmergencyContactWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.update_item(session, current_user.id, contact_id, payload)


@router.delete("/{contact_id}", response_model=SuccessResponse)
def delete_contact(
    contact_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    service.delete_item(session, current_user.id, contact_id)
    return SuccessResponse()
