import logging
import uuid

from sqlmodel import Session

from medilink.core.errors import NotFoundError
from medilink.models.order import Order
from medilink.repositories.order_repo import OrderRepository
from medilink.schemas.order import (
    AdminOrderRead,
    AdminOrderUpdate,
    OrderItemRead,
    OrderOwner,
    OrderRead,
)
from medilink.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business logic for orders.

    Responsibilities:
      - list a customer's orders with their items
      - admin listing and status / tracking updates
      - tell the customer about every admin update via a notification
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        notifications: NotificationService,
    ):
        self.order_repo = order_repo
        self.notifications = notifications

    # -------- User-facing operations --------

    def list_user_orders(self, session: Session, user_id: uuid.UUID) -> list[OrderRead]:
        orders = self.order_repo.list_for_user(session, user_id)
        return [self._build_order_dto(session, order) for order in orders]

    # -------- Admin operations --------

    def list_all_orders(self, session: Session) -> list[AdminOrderRead]:
        result: list[AdminOrderRead] = []
        for order, owner in self.order_repo.list_all_with_owner(session):
            dto = self._build_order_dto(session, order)
            result.append(
                AdminOrderRead(
                    **dto.model_dump(),
                    user=OrderOwner(id=owner.id, name=owner.name, email=owner.email),
                )
            )
        return result

    def admin_update_order(
        self,
        session: Session,
        payload: AdminOrderUpdate,
    ) -> Order:
        """
        Apply status / tracking / notes changes, then append an
        order_update notification for the order's owner.

        trackingNumber and notes: a blank string clears the value.
        """
        order = self.order_repo.get_by_id(session, payload.order_id)
        if not order:
            raise NotFoundError("Order not found")

        fields_set = payload.model_fields_set
        if payload.status:
            order.status = payload.status
        if "tracking_number" in fields_set:
            order.tracking_number = (payload.tracking_number or "").strip() or None
        if "notes" in fields_set:
            order.notes = (payload.notes or "").strip() or None

        order = self.order_repo.update(session, order)
        logger.info("Order %s updated to status %s", order.id, order.status)

        message = f"Your order status has been updated to {order.status}."
        if order.tracking_number:
            message += f" Tracking number: {order.tracking_number}"

        self.notifications.create_notification(
            session,
            user_id=order.user_id,
            type="order_update",
            title="Order Update",
            message=message,
            related_order_id=order.id,
        )
        return order

    # -------- Helper DTO builder --------

    def _build_order_dto(self, session: Session, order: Order) -> OrderRead:
        """
        Compose OrderRead from ORM models, including product names.
        """
        item_dtos: list[OrderItemRead] = []
        for it, product_name in self.order_repo.list_items_for_order(session, order.id):
            item_dtos.append(
                OrderItemRead(
                    id=it.id,
                    order_id=it.order_id,
                    product_id=it.product_id,
                    product_name=product_name,
                    quantity=it.quantity,
                    unit_price=it.unit_price,
                    total_price=it.total_price,
                )
            )

        return OrderRead(
            id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount,
            currency=order.currency,
            status=order.status,  # Literal
            tracking_number=order.tracking_number,
            shipping_address_id=order.shipping_address_id,
            notes=order.notes,
            created_at=order.created_at,
            items=item_dtos,
        )
