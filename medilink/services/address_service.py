import logging
import uuid

from sqlmodel import Session

from medilink.core.errors import NotFoundError
from medilink.models.address import Address
from medilink.repositories.address_repo import AddressRepository
from medilink.schemas.address import AddressCreate, AddressUpdate

logger = logging.getLogger(__name__)


class AddressService:
    """
    The caller's shipping addresses.

    Setting an address as default clears the flag on the others in the
    same commit, so a user never has two defaults.
    """

    def __init__(self, repo: AddressRepository):
        self.repo = repo

    def _get_owned_or_404(
        self,
        session: Session,
        user_id: uuid.UUID,
        address_id: uuid.UUID,
    ) -> Address:
        address = self.repo.get_owned(session, address_id, user_id)
        if address is None:
            raise NotFoundError("Address not found")
        return address

    def list_addresses(self, session: Session, user_id: uuid.UUID) -> list[Address]:
        return self.repo.list_for_user(session, user_id)

    def create_address(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: AddressCreate,
    ) -> Address:
        if payload.is_default:
            self.repo.clear_default(session, user_id)

        address = Address(user_id=user_id, **payload.model_dump())
        address = self.repo.save(session, address)
        logger.info("Created address %s for user %s", address.id, user_id)
        return address

    def update_address(
        self,
        session: Session,
        user_id: uuid.UUID,
        address_id: uuid.UUID,
        payload: AddressUpdate,
    ) -> Address:
        address = self._get_owned_or_404(session, user_id, address_id)

        if payload.is_default:
            self.repo.clear_default(session, user_id)
        if payload.is_default is not None:
            address.is_default = payload.is_default

        for field in ("address_line1", "city", "state", "postal_code", "country"):
            value = getattr(payload, field)
            if value:
                setattr(address, field, value)
        if "address_line2" in payload.model_fields_set:
            address.address_line2 = payload.address_line2

        return self.repo.save(session, address)

    def delete_address(
        self,
        session: Session,
        user_id: uuid.UUID,
        address_id: uuid.UUID,
    ) -> None:
        address = self._get_owned_or_404(session, user_id, address_id)
        self.repo.delete(session, address)
