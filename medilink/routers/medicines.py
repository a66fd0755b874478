import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.medical import Medicine
from medilink.models.user import User
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.medical import (
    MedicineRead,
    MedicineReorder,
    MedicineWrite,
    SuccessResponse,
)
from medilink.services.page_item_service import PageItemService
from medilink.services.page_service import PageService

router = APIRouter(prefix="/page/medicines", tags=["Medicines"])

service = PageItemService(
    PageItemRepository(Medicine),
    PageService(PageRepository()),
    label="Medicine",
)


@router.get("", response_model=list[MedicineRead])
def list_medicines(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    List the caller's medicines in display order.
    """
    return service.list_items(session, current_user.id)


@router.post(
    "",
    response_model=MedicineRead,
    status_code=status.HTTP_201_CREATED,
)
def create_medicine(
    payload: MedicineWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Add a medicine at the end of the list.

    - 400 if name is blank.
    - 404 if the caller has no page yet.
    """
    return service.create_item(session, current_user.id, payload)


# Declared before /{medicine_id} so "reorder" is not parsed as an id.
@router.put("/reorder", response_model=SuccessResponse)
def reorder_medicines(
    payload: MedicineReorder,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Body: {"medicineIds": [id, ...]} in the desired order.
    """
    service.reorder(session, current_user.id, payload.medicine_ids)
    return SuccessResponse()


@router.put("/{medicine_id}", response_model=MedicineRead)
def update_medicine(
    medicine_id: uuid.UUID,
    payload: MedicineWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.update_item(session, current_user.id, medicine_id, payload)


@router.delete("/{medicine_id}", response_model=SuccessResponse)
def delete_medicine(
    medicine_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    service.delete_item(session, current_user.id, medicine_id)
    return SuccessResponse()
