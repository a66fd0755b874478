import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from medilink.core.errors import AuthorizationError, NotFoundError, ValidationError
from medilink.models.medical import Allergy, Diagnosis, EmergencyContact, Medicine
from medilink.models.page import Page
from medilink.models.user import User
from medilink.repositories.page_item_repo import PageItemRepository
from medilink.repositories.page_repo import PageRepository
from medilink.schemas.medical import (
    AllergyRead,
    DiagnosisRead,
    EmergencyContactRead,
    MedicineRead,
)
from medilink.schemas.page import PageRead, PageUpdate, PublicPageRead

logger = logging.getLogger(__name__)


class PageService:
    """
    Page ownership and the public profile view.

    Responsibilities:
      - resolve the caller's single page (scoping step for every
        child-entity operation)
      - create the page on first visit to the dashboard
      - apply owner edits to page settings
      - serve the public view with its privacy rules
    """

    def __init__(self, repo: PageRepository):
        self.repo = repo

    def resolve_page(self, session: Session, user_id: uuid.UUID) -> Page:
        """
        Return the page owned by `user_id`.

        Raises:
            NotFoundError: if the user has not set up a page yet. Callers
            must not fall back to an empty page.
        """
        page = self.repo.get_for_user(session, user_id)
        if page is None:
            raise NotFoundError("Page not found. Please set up your page first.")
        return page

    # ----- Owner operations -----

    @staticmethod
    def _require_username(current_user: User) -> None:
        if not current_user.username:
            raise ValidationError("Username not set")

    def get_or_create_page(self, session: Session, current_user: User) -> Page:
        """
        The caller's page, created with a fresh unique_key if missing.

        A username is required first because it forms the public link.
        """
        self._require_username(current_user)

        user_id = current_user.id
        page = self.repo.get_for_user(session, user_id)
        if page is not None:
            return page

        try:
            page = self.repo.create(session, Page(user_id=user_id))
        except IntegrityError:
            # a concurrent first visit created it; pages.user_id is unique
            session.rollback()
            page = self.repo.get_for_user(session, user_id)
            if page is None:
                raise
            return page

        logger.info("Created page %s for user %s", page.id, user_id)
        return page

    def update_page(
        self,
        session: Session,
        current_user: User,
        payload: PageUpdate,
    ) -> Page:
        """
        Create or update the caller's page.

        Text fields are replaced as sent (missing or blank -> null);
        is_private, color_mode and primary_color are only changed when
        present in the payload.
        """
        page = self.get_or_create_page(session, current_user)

        page.first_name = payload.first_name
        page.last_name = payload.last_name
        page.email = payload.email
        page.phone = payload.phone
        page.description = payload.description

        fields_set = payload.model_fields_set
        if payload.is_private is not None:
            page.is_private = payload.is_private
        if payload.color_mode is not None:
            page.color_mode = payload.color_mode
        if "primary_color" in fields_set:
            page.primary_color = payload.primary_color

        return self.repo.update(session, page)

    # ----- Public view -----

    def get_public_page(self, session: Session, identifier: str) -> PublicPageRead:
        """
        Look a page up by owner username or by unique_key.

        A private page is hidden when reached by username but served when
        reached by its unique_key.
        """
        identifier = identifier.strip()
        if not identifier:
            raise ValidationError("Identifier is required")

        page = self.repo.get_by_username(session, identifier)
        if page is not None:
            if page.is_private:
                raise AuthorizationError("This page is private")
        else:
            page = self.repo.get_by_unique_key(session, identifier)

        if page is None:
            raise NotFoundError("Page not found")

        owner = session.get(User, page.user_id)

        def rows(repo: PageItemRepository, read_model):
            return [
                read_model.model_validate(row)
                for row in repo.list_for_page(session, page.id)
            ]

        return PublicPageRead(
            page=PageRead.model_validate(page),
            username=owner.username if owner else None,
            user_name=owner.name if owner else None,
            user_image=owner.image if owner else None,
            medicines=rows(PageItemRepository(Medicine), MedicineRead),
            allergies=rows(PageItemRepository(Allergy), AllergyRead),
            diagnoses=rows(PageItemRepository(Diagnosis), DiagnosisRead),
            contacts=rows(
                PageItemRepository(EmergencyContact, ordered=False),
                EmergencyContactRead,
            ),
        )
