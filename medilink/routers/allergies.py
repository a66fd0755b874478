import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.medical import Allergy
from medilink.models.user import User
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.medical import (
    AllergyRead,
    AllergyReorder,
    AllergyWrite,
    SuccessResponse,
)
from medilink.services.page_item_service import PageItemService
from medilink.services.page_service import PageService

router = APIRouter(prefix="/page/allergies", tags=["Allergies"])

service = PageItemService(
    PageItemRepository(Allergy),
    PageService(PageRepository()),
    label="Allergy",
)


@router.get("", response_model=list[AllergyRead])
def list_allergies(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.list_items(session, current_user.id)


@router.post(
    "",
    response_model=AllergyRead,
    status_code=status.HTTP_201_CREATED,
)
def create_allergy(
    payload: AllergyWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Add an allergy at the end of the list.

    Unknown severity values are stored as "mild".
    """
    return service.create_item(session, current_user.id, payload)


@router.put("/reorder", response_model=SuccessResponse)
def reorder_allergies(
    payload: AllergyReorder,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Body: {"allergyIds": [id, ...]} in the desired order.
    """
    service.reorder(session, current_user.id, payload.allergy_ids)
    return SuccessResponse()


@router.put("/{allergy_id}", response_model=AllergyRead)
def update_allergy(
    allergy_id: uuid.UUID,
    payload: AllergyWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.update_item(session, current_user.id, allergy_id, payload)


@router.delete("/{allergy_id}", response_model=SuccessResponse)
def delete_allergy(
    allergy_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    service.delete_item(session, current_user.id, allergy_id)
    return SuccessResponse()
