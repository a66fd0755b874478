import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import SQLModel

NotificationType = Literal["order_update", "subscription_update", "system"]


class NotificationRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    type: NotificationType
    title: str
    message: str
    related_order_id: uuid.UUID | None
    is_read: bool
    created_at: datetime


class NotificationList(SQLModel):
    notifications: list[NotificationRead]
    unread_count: int


class NotificationMarkRead(BaseModel):
    """
    PATCH body: either {"notificationId": ...} or {"markAll": true}.
    """

    model_config = ConfigDict(populate_by_name=True)

    notification_id: uuid.UUID | None = Field(default=None, alias="notificationId")
    mark_all: bool = Field(default=False, alias="markAll")
