from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import get_current_user, require_admin
from medilink.database import get_session
from medilink.models.user import User
from medilink.repositories.notification_repo import NotificationRepository
from medilink.repositories.order_repo import OrderRepository
from medilink.schemas.medical import SuccessResponse
from medilink.schemas.order import AdminOrderRead, AdminOrderUpdate, OrderRead
from medilink.services.notification_service import NotificationService
from medilink.services.order_service import OrderService

router = APIRouter(tags=["Orders"])

order_repo = OrderRepository()
service = OrderService(order_repo, NotificationService(NotificationRepository()))


# -------- User-facing endpoints --------


@router.get("/orders", response_model=list[OrderRead])
def list_my_orders(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    List the authenticated user's orders with items, newest first.
    """
    return service.list_user_orders(session, current_user.id)


# -------- Admin endpoints --------


@router.get(
    "/admin/orders",
    response_model=list[AdminOrderRead],
    dependencies=[Depends(require_admin)],
)
def list_all_orders(session: Session = Depends(get_session)):
    """
    List all orders with items and owner (admin only).
    """
    return service.list_all_orders(session)


@router.patch(
    "/admin/orders",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
)
def update_order(
    payload: AdminOrderUpdate,
    session: Session = Depends(get_session),
):
    """
    Update status / tracking number / notes (admin only).

    The order's owner receives an "order_update" notification.
    """
    service.admin_update_order(session, payload)
    return SuccessResponse()
