import uuid

from sqlmodel import Session, select

from medilink.models.address import Address


class AddressRepository:
    """
    Data access layer for the user address book.
    """

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[Address]:
        stmt = (
            select(Address)
            .where(Address.user_id == user_id)
            .order_by(Address.created_at)
        )
        return list(session.exec(stmt).all())

    def get_owned(
        self,
        session: Session,
        address_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> Address | None:
        stmt = select(Address).where(
            Address.id == address_id,
            Address.user_id == user_id,
        )
        return session.exec(stmt).first()

    def clear_default(self, session: Session, user_id: uuid.UUID) -> None:
        """Unset is_default on the user's addresses. Does not commit."""
        stmt = select(Address).where(
            Address.user_id == user_id,
            Address.is_default == True,  # noqa: E712
        )
        for address in session.exec(stmt).all():
            address.is_default = False
            session.add(address)

    def save(self, session: Session, address: Address) -> Address:
        session.add(address)
        session.commit()
        session.refresh(address)
        return address

    def delete(self, session: Session, address: Address) -> None:
        session.delete(address)
        session.commit()
