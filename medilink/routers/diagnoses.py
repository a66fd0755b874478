import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.medical import Diagnosis
from medilink.models.user import User
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.medical import (
    DiagnosisRead,
    DiagnosisReorder,
    DiagnosisWrite,
    SuccessResponse,
)
from medilink.services.page_item_service import PageItemService
from medilink.services.page_service import PageService

router = APIRouter(prefix="/page/diagnoses", tags=["Diagnoses"])

service = PageItemService(
    PageItemRepository(Diagnosis),
    PageService(PageRepository()),
    label="Diagnosis",
)


@router.get("", response_model=list[DiagnosisRead])
def list_diagnoses(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.list_items(session, current_user.id)


@router.post(
    "",
    response_model=DiagnosisRead,
    status_code=status.HTTP_201_CREATED,
)
def create_diagnosis(
    payload: DiagnosisWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Add a diagnosis at the end of the list.

    Severity must be one of mild, moderate, severe, critical; anything
    else is stored as null.
    """
    return service.create_item(session, current_user.id, payload)


@router.put("/reorder", response_model=SuccessResponse)
def reorder_diagnoses(
    payload: DiagnosisReorder,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Body: {"diagnosisIds": [id, ...]} in the desired order.
    """
    service.reorder(session, current_user.id, payload.diagnosis_ids)
    return SuccessResponse()


@router.put("/{diagnosis_id}", response_model=DiagnosisRead)
def update_diagnosis(
    diagnosis_id: uuid.UUID,
    payload: DiagnosisWrite,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.update_item(session, current_user.id, diagnosis_id, payload)


@router.delete("/{diagnosis_id}", response_model=SuccessResponse)
def delete_diagnosis(
    diagnosis_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    service.delete_item(session, current_user.id, diagnosis_id)
    return SuccessResponse()
