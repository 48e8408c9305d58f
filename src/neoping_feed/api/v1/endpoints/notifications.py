# src/neoping_feed/api/v1/endpoints/notifications.py
"""Notification endpoints for the current user."""

from fastapi import APIRouter, Query

from neoping_feed.core.settings import settings
from neoping_feed.schemas.notification import NotificationList, NotificationResponse
from neoping_feed.services.notifications import NotificationService

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationList)
async def list_notifications(
    db: SessionDep,
    current_user: CurrentUserDep,
    page: int = Query(0, ge=0, le=settings.max_page_index),
    limit: int = Query(20, ge=1, le=settings.max_page_size),
) -> NotificationList:
    """Return the caller's notifications, newest first."""
    rows, unread = NotificationService(db).list_for(current_user, page=page, page_size=limit)
    return NotificationList(
        notifications=[NotificationResponse.model_validate(n) for n in rows],
        unread=unread,
    )


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: int,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> NotificationResponse:
    notification = NotificationService(db).mark_read(current_user, notification_id)
    return NotificationResponse.model_validate(notification)
