from sqlmodel import Session, select

from medilink.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (queries).
    - No FastAPI, no business logic.
    """

    def list_active(self, session: Session) -> list[Product]:
        stmt = (
            select(Product)
            .where(Product.is_active == True)  # noqa: E712
            .order_by(Product.price)
        )
        return list(session.exec(stmt).all())
