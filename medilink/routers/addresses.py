import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.user import User
from medilink.repositories.address_repo import AddressRepository
from medilink.schemas.address import (
    AddressCreate,
    AddressList,
    AddressRead,
    AddressUpdate,
)
from medilink.schemas.medical import SuccessResponse
from medilink.services.address_service import AddressService

router = APIRouter(prefix="/address", tags=["Addresses"])

repo = AddressRepository()
service = AddressService(repo)


@router.get("", response_model=AddressList)
def list_addresses(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    The caller's address book, oldest first.
    """
    return AddressList(addresses=service.list_addresses(session, current_user.id))


@router.post(
    "",
    response_model=AddressRead,
    status_code=status.HTTP_201_CREATED,
)
def create_address(
    payload: AddressCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Add an address.

    - isDefault=true clears the default flag on the caller's other addresses.
    """
    return service.create_address(session, current_user.id, payload)


@router.put("/{address_id}", response_model=AddressRead)
def update_address(
    address_id: uuid.UUID,
    payload: AddressUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    return service.update_address(session, current_user.id, address_id, payload)


@router.delete("/{address_id}", response_model=SuccessResponse)
def delete_address(
    address_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    service.delete_address(session, current_user.id, address_id)
    return SuccessResponse()
