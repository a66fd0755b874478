import uuid
from typing import Generic, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

ItemT = TypeVar("ItemT", bound=SQLModel)


class PageItemRepository(Generic[ItemT]):
    """
    Data access for one page-scoped child table (medicines, allergies,
    diagnoses, emergency contacts).

    Every read that addresses a row by id also filters on page_id, so a
    row that belongs to another page is indistinguishable from a missing
    one.

    `ordered=True` means the table has a display_order column and lists
    are sorted by it, then by created_at.
    """

    def __init__(self, model: type[ItemT], ordered: bool = True):
        self.model = model
        self.ordered = ordered

    # ----- Queries -----

    def list_for_page(self, session: Session, page_id: uuid.UUID) -> list[ItemT]:
        stmt = select(self.model).where(self.model.page_id == page_id)
        if self.ordered:
            stmt = stmt.order_by(
                self.model.display_order.asc(),
                self.model.created_at.asc(),
            )
        else:
            stmt = stmt.order_by(self.model.created_at.asc())
        return list(session.exec(stmt).all())

    def get_owned(
        self,
        session: Session,
        item_id: uuid.UUID,
        page_id: uuid.UUID,
    ) -> ItemT | None:
        """Row with this id *and* this page_id, else None."""
        stmt = select(self.model).where(
            self.model.id == item_id,
            self.model.page_id == page_id,
        )
        return session.exec(stmt).first()

    def list_owned_by_ids(
        self,
        session: Session,
        page_id: uuid.UUID,
        item_ids: list[uuid.UUID],
    ) -> list[ItemT]:
        stmt = select(self.model).where(
            self.model.page_id == page_id,
            self.model.id.in_(item_ids),
        )
        return list(session.exec(stmt).all())

    def max_display_order(self, session: Session, page_id: uuid.UUID) -> int | None:
        """Largest display_order on the page, or None when it has no rows."""
        stmt = select(func.max(self.model.display_order)).where(
            self.model.page_id == page_id
        )
        return session.exec(stmt).one()

    # ----- CRUD -----

    def create(self, session: Session, item: ItemT) -> ItemT:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: ItemT) -> ItemT:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def delete(self, session: Session, item: ItemT) -> None:
        session.delete(item)
        session.commit()

    def apply_order(
        self,
        session: Session,
        items: list[ItemT],
        ordered_ids: list[uuid.UUID],
    ) -> None:
        """
        Set display_order = position in `ordered_ids` for every row and
        commit once, so the new order lands all together or not at all.
        """
        position = {item_id: index for index, item_id in enumerate(ordered_ids)}
        for item in items:
            item.display_order = position[item.id]
            session.add(item)
        session.commit()
