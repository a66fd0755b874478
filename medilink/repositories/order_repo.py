import uuid

from sqlmodel import Session, select

from medilink.models.order import Order, OrderItem
from medilink.models.product import Product
from medilink.models.user import User


class OrderRepository:
    """
    Data access layer for orders and order_items.
    """

    # ---- Orders ----

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[Order]:
        stmt = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def list_all_with_owner(self, session: Session) -> list[tuple[Order, User]]:
        stmt = (
            select(Order, User)
            .join(User, User.id == Order.user_id)
            .order_by(Order.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def get_by_id(self, session: Session, order_id: uuid.UUID) -> Order | None:
        return session.get(Order, order_id)

    def update(self, session: Session, order: Order) -> Order:
        session.add(order)
        session.commit()
        session.refresh(order)
        return order

    # ---- Order items ----

    def list_items_for_order(
        self,
        session: Session,
        order_id: uuid.UUID,
    ) -> list[tuple[OrderItem, str | None]]:
        """Line items of an order with the current product name."""
        stmt = (
            select(OrderItem, Product.name)
            .join(Product, Product.id == OrderItem.product_id, isouter=True)
            .where(OrderItem.order_id == order_id)
        )
        return list(session.exec(stmt).all())
