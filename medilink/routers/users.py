from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.user import User
from medilink.repositories.user_repo import UserRepository
from medilink.schemas.user import UsernameRead, UsernameSet, UserRead
from medilink.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["Users"])

repo = UserRepository()
service = UserService(repo)


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    """
    Return the authenticated user's profile.
    """
    return current_user


@router.get("/username", response_model=UsernameRead)
def read_username(current_user: User = Depends(get_current_user)):
    return service.get_username(current_user)


@router.post("/username", response_model=UsernameRead)
def set_username(
    payload: UsernameSet,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Claim a public username.

    - 400 if the format is wrong (3-50 of letters, digits, _ and -).
    - 409 if another user already has it.
    """
    user = service.set_username(session, current_user, payload.username)
    return service.get_username(user)
