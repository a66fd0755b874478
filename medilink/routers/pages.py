from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.user import User
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.page import PageRead, PageUpdate, PublicPageRead
from medilink.services.page_service import PageService

router = APIRouter(tags=["Page"])

service = PageService(PageRepository())


# -------- Owner endpoints --------


@router.get("/page", response_model=PageRead)
def read_my_page(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Return the caller's page, creating it on first visit.

    - 400 if the caller has not chosen a username yet.
    """
    return service.get_or_create_page(session, current_user)


@router.put("/page", response_model=PageRead)
def update_my_page(
    payload: PageUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Update page settings (names, contact info, description, privacy,
    theme).
    """
    return service.update_page(session, current_user, payload)


# -------- Public endpoint --------


@router.get("/public/{identifier}", response_model=PublicPageRead)
def read_public_page(
    identifier: str,
    session: Session = Depends(get_session),
):
    """
    Public profile by username or unique key. No authentication.

    - 403 if the page is private and was requested by username.
    - 404 if nothing matches.
    """
    return service.get_public_page(session, identifier)
