import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import require_admin
from medilink.database import get_session
from medilink.repositories.user_repo import UserRepository
from medilink.schemas.medical import SuccessResponse
from medilink.schemas.user import AdminUserUpdate, UserRead
from medilink.services.user_service import UserService

router = APIRouter(
    prefix="/admin/users",
    tags=["Admin Users"],
    dependencies=[Depends(require_admin)],
)

repo = UserRepository()
service = UserService(repo)


@router.get("", response_model=list[UserRead])
def list_users(session: Session = Depends(get_session)):
    """
    List all users, oldest first (admin only).
    """
    return service.list_users(session)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_user(session, user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: uuid.UUID,
    payload: AdminUserUpdate,
    session: Session = Depends(get_session),
):
    """
    Edit name, email, username or admin flag (admin only).

    - 409 if the new email or username belongs to someone else.
    """
    return service.admin_update_user(session, user_id, payload)


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a user and, through the store's cascades, their page,
    medical items, orders and notifications (admin only).
    """
    service.delete_user(session, user_id)
    return SuccessResponse()
