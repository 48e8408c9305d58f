"""Notification Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    """Single notification for the current user."""

    id: int
    kind: str
    message: str
    content_item_id: int | None = None
    created_at: datetime
    read: bool

    model_config = ConfigDict(from_attributes=True)


class NotificationList(BaseModel):
    """Notifications, newest first."""

    success: bool = True
    notifications: list[NotificationResponse]
    unread: int
