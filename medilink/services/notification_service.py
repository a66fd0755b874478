import logging
import uuid

from sqlmodel import Session

from medilink.core.errors import NotFoundError, ValidationError
from medilink.models.notification import Notification
from medilink.repositories.notification_repo import NotificationRepository
from medilink.schemas.notification import (
    NotificationList,
    NotificationMarkRead,
    NotificationRead,
    NotificationType,
)

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Per-user notification ledger.

    Rows are only ever appended; the one mutable field is is_read.
    """

    def __init__(self, repo: NotificationRepository):
        self.repo = repo

    def create_notification(
        self,
        session: Session,
        user_id: uuid.UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_order_id: uuid.UUID | None = None,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            related_order_id=related_order_id,
        )
        return self.repo.create(session, notification)

    def list_notifications(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> NotificationList:
        """Newest first, with the unread count taken from the same rows."""
        rows = self.repo.list_for_user(session, user_id)
        unread_count = len([n for n in rows if not n.is_read])
        return NotificationList(
            notifications=[NotificationRead.model_validate(n) for n in rows],
            unread_count=unread_count,
        )

    def mark_read(
        self,
        session: Session,
        user_id: uuid.UUID,
        notification_id: uuid.UUID,
    ) -> None:
        """
        Flag one of the caller's notifications as read. Marking an
        already-read notification succeeds without a write.
        """
        notification = self.repo.get_owned(session, notification_id, user_id)
        if notification is None:
            raise NotFoundError("Notification not found")
        if notification.is_read:
            return
        notification.is_read = True
        self.repo.save_all(session, [notification])

    def mark_all_read(self, session: Session, user_id: uuid.UUID) -> None:
        unread = self.repo.list_unread_for_user(session, user_id)
        for notification in unread:
            notification.is_read = True
        self.repo.save_all(session, unread)

    def apply_patch(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: NotificationMarkRead,
    ) -> None:
        """PATCH /notifications dispatch: markAll wins over notificationId."""
        if payload.mark_all:
            self.mark_all_read(session, user_id)
            return
        if payload.notification_id is not None:
            self.mark_read(session, user_id, payload.notification_id)
            return
        raise ValidationError("Invalid request")
