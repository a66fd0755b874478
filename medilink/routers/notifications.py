from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import get_current_user
from medilink.database import get_session
from medilink.models.user import User
from medilink.repositories.notification_repo import NotificationRepository
from medilink.schemas.medical import SuccessResponse
from medilink.schemas.notification import NotificationList, NotificationMarkRead
from medilink.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])

service = NotificationService(NotificationRepository())


@router.get("", response_model=NotificationList)
def list_notifications(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    The caller's notifications, newest first, plus the unread count.
    """
    return service.list_notifications(session, current_user.id)


@router.patch("", response_model=SuccessResponse)
def mark_notifications_read(
    payload: NotificationMarkRead,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Body: {"notificationId": id} to mark one, or {"markAll": true}.
    """
    service.apply_patch(session, current_user.id, payload)
    return SuccessResponse()
