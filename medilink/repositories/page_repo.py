import uuid

from sqlmodel import Session, select

from medilink.models.page import Page
from medilink.models.user import User


class PageRepository:
    """
    Data access layer for Page.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_for_user(self, session: Session, user_id: uuid.UUID) -> Page | None:
        """The page owned by this user, or None."""
        stmt = select(Page).where(Page.user_id == user_id)
        return session.exec(stmt).first()

    def get_by_unique_key(self, session: Session, unique_key: str) -> Page | None:
        stmt = select(Page).where(Page.unique_key == unique_key)
        return session.exec(stmt).first()

    def get_by_username(self, session: Session, username: str) -> Page | None:
        """Page whose owner has this public username."""
        stmt = (
            select(Page)
            .join(User, User.id == Page.user_id)
            .where(User.username == username)
        )
        return session.exec(stmt).first()

    def create(self, session: Session, page: Page) -> Page:
        session.add(page)
        session.commit()
        session.refresh(page)
        return page

    def update(self, session: Session, page: Page) -> Page:
        session.add(page)
        session.commit()
        session.refresh(page)
        return page
