import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from medilink.core.errors import ConflictError, NotFoundError, ValidationError
from medilink.models.user import User
from medilink.repositories.user_repo import UserRepository
from medilink.schemas.user import USERNAME_PATTERN, AdminUserUpdate, UsernameRead

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - username format and uniqueness
      - admin user management
      - turn store uniqueness violations into ConflictError
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def _save_unique(self, session: Session, user: User, message: str) -> User:
        """Persist, mapping a unique-constraint violation to ConflictError."""
        try:
            return self.repo.update(session, user)
        except IntegrityError:
            session.rollback()
            raise ConflictError(message)

    # ----- Username -----

    def get_username(self, current_user: User) -> UsernameRead:
        return UsernameRead(
            username=current_user.username,
            has_username=bool(current_user.username),
        )

    def set_username(
        self,
        session: Session,
        current_user: User,
        candidate: str,
    ) -> User:
        """
        Claim `candidate` as the caller's public username.

        Rules:
          - 3-50 chars of letters, digits, underscore, hyphen
          - must not belong to another user; re-submitting your own
            username is fine

        The lookup is a check-then-act; a concurrent claim that slips past
        it is caught by the unique index and reported the same way.
        """
        if not candidate or not candidate.strip():
            raise ValidationError("Username is required")

        if not USERNAME_PATTERN.fullmatch(candidate):
            raise ValidationError(
                "Username must be 3-50 characters and contain only letters, "
                "numbers, underscores, and hyphens"
            )

        existing = self.repo.get_by_username(session, candidate)
        if existing is not None and existing.id != current_user.id:
            raise ConflictError("Username is already taken")

        current_user.username = candidate
        return self._save_unique(session, current_user, "Username is already taken")

    # ----- Admin operations -----

    def list_users(self, session: Session) -> list[User]:
        return self.repo.list(session)

    def get_user(self, session: Session, user_id: uuid.UUID) -> User:
        """
        Raises:
            NotFoundError: if no such user.
        """
        user = self.repo.get_by_id(session, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def admin_update_user(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: AdminUserUpdate,
    ) -> User:
        """Partial update; only fields present in the payload change."""
        user = self.get_user(session, user_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            if value is None and field in ("name", "email", "is_admin"):
                continue
            setattr(user, field, value)

        user = self._save_unique(session, user, "Email or username already exists")
        logger.info("Admin updated user %s", user_id)
        return user

    def delete_user(self, session: Session, user_id: uuid.UUID) -> None:
        """Delete a user; the store cascades to page, items and orders."""
        user = self.get_user(session, user_id)
        self.repo.delete(session, user)
        logger.info("Admin deleted user %s", user_id)
