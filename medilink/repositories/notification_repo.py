import uuid

from sqlmodel import Session, select

from medilink.models.notification import Notification


class NotificationRepository:
    """
    Data access layer for notifications.
    """

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def get_owned(
        self,
        session: Session,
        notification_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> Notification | None:
        stmt = select(Notification).where(
            Notification.id == notification_id,
            Notification.user_id == user_id,
        )
        return session.exec(stmt).first()

    def list_unread_for_user(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> list[Notification]:
        stmt = select(Notification).where(
            Notification.user_id == user_id,
            Notification.is_read == False,  # noqa: E712
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, notification: Notification) -> Notification:
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    def save_all(self, session: Session, notifications: list[Notification]) -> None:
        session.add_all(notifications)
        session.commit()
