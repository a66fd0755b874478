import logging
import uuid
from typing import Generic

from pydantic import BaseModel
from sqlmodel import Session

from medilink.core.errors import NotFoundError, ValidationError
from medilink.repositories.page_item_repo import ItemT, PageItemRepository
from medilink.services.page_service import PageService

logger = logging.getLogger(__name__)


class PageItemService(Generic[ItemT]):
    """
    CRUD plus reordering for one page-scoped collection.

    Every operation starts by resolving the caller's page; rows are then
    addressed only through (id, page_id), never through id alone.

    For ordered collections (`repo.ordered`), a new row is appended after
    its siblings and the reorder operation rewrites display_order from
    the caller's list of ids.
    """

    def __init__(
        self,
        repo: PageItemRepository[ItemT],
        pages: PageService,
        label: str,
    ):
        self.repo = repo
        self.pages = pages
        # Human name used in error messages, e.g. "Medicine"
        self.label = label

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def _get_owned_or_404(
        self,
        session: Session,
        item_id: uuid.UUID,
        page_id: uuid.UUID,
    ) -> ItemT:
        item = self.repo.get_owned(session, item_id, page_id)
        if item is None:
            logger.warning(
                "%s %s not found on page %s", self.label, item_id, page_id
            )
            raise self._not_found()
        return item

    # ----- Operations -----

    def list_items(self, session: Session, user_id: uuid.UUID) -> list[ItemT]:
        page = self.pages.resolve_page(session, user_id)
        return self.repo.list_for_page(session, page.id)

    def create_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: BaseModel,
    ) -> ItemT:
        """
        Insert a row on the caller's page.

        Ordered rows get display_order = max(existing) + 1, or 0 for the
        first row, so they show up last.
        """
        page = self.pages.resolve_page(session, user_id)

        item = self.repo.model(page_id=page.id, **payload.model_dump())
        if self.repo.ordered:
            current_max = self.repo.max_display_order(session, page.id)
            item.display_order = 0 if current_max is None else current_max + 1

        return self.repo.create(session, item)

    def update_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        item_id: uuid.UUID,
        payload: BaseModel,
    ) -> ItemT:
        """
        Replace the editable fields of an owned row. display_order is
        not part of any write payload and is left alone.
        """
        page = self.pages.resolve_page(session, user_id)
        item = self._get_owned_or_404(session, item_id, page.id)

        for field, value in payload.model_dump().items():
            setattr(item, field, value)

        return self.repo.update(session, item)

    def delete_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        item_id: uuid.UUID,
    ) -> None:
        page = self.pages.resolve_page(session, user_id)
        item = self._get_owned_or_404(session, item_id, page.id)
        self.repo.delete(session, item)

    def reorder(
        self,
        session: Session,
        user_id: uuid.UUID,
        ordered_ids: list[uuid.UUID],
    ) -> None:
        """
        Make `ordered_ids` the new display order of the caller's rows.

        Steps:
          1. Reject an empty list or one with repeated ids.
          2. Load the rows matching those ids on the caller's page; if
             any id is missing or foreign, fail before writing anything.
          3. Assign display_order = index and commit once.
        """
        if not self.repo.ordered:
            raise ValidationError(f"{self.label} items cannot be reordered")

        if not ordered_ids:
            raise ValidationError(f"Invalid {self.label.lower()} IDs array")

        if len(set(ordered_ids)) != len(ordered_ids):
            raise ValidationError(f"Duplicate {self.label.lower()} IDs in reorder request")

        page = self.pages.resolve_page(session, user_id)

        items = self.repo.list_owned_by_ids(session, page.id, ordered_ids)
        if len(items) != len(ordered_ids):
            logger.warning(
                "Reorder on page %s matched %d of %d %s ids",
                page.id,
                len(items),
                len(ordered_ids),
                self.label.lower(),
            )
            raise NotFoundError(f"Some {self.label.lower()} items not found")

        self.repo.apply_order(session, items, ordered_ids)
        logger.info(
            "Reordered %d %s rows on page %s", len(items), self.label.lower(), page.id
        )
