from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from medilink.models.medical import Allergy, Diagnosis, Medicine
from medilink.models.order import Order
from medilink.models.user import User


class StatsRepository:
    """
    Read-only aggregated queries for admin dashboard.
    """

    def _count(self, session: Session, model: type[SQLModel]) -> int:
        stmt = select(func.count()).select_from(model)
        # SQLModel's Session.exec() -> ScalarResult -> use .one()
        value = session.exec(stmt).one()
        return int(value or 0)

    def count_users(self, session: Session) -> int:
        return self._count(session, User)

    def count_medicines(self, session: Session) -> int:
        return self._count(session, Medicine)

    def count_diagnoses(self, session: Session) -> int:
        return self._count(session, Diagnosis)

    def count_allergies(self, session: Session) -> int:
        return self._count(session, Allergy)

    def count_orders(self, session: Session) -> int:
        return self._count(session, Order)
