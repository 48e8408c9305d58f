"""Reading and acknowledging notifications."""
from __future__ import annotations

from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import NotFoundError
from neoping_feed.db.session import atomic, store_errors
from neoping_feed.models import Notification, User
from neoping_feed.repositories import InteractionRepository
from neoping_feed.services.feed import clamp_page


class NotificationService:
    """Notifications are written by the interaction gateway; this reads them."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.facts = InteractionRepository(db)

    def list_for(
        self,
        recipient: User,
        *,
        page: int = 0,
        page_size: int = 20,
    ) -> tuple[list[Notification], int]:
        """Return one page of notifications, newest first, and the unread total."""
        with store_errors("fetch notifications"):
            rows = self.facts.list_notifications(recipient.id, clamp_page(page), page_size)
            unread = self.facts.count_unread(recipient.id)
        return rows, unread

    def mark_read(self, recipient: User, notification_id: int) -> Notification:
        """Flag a notification as read; other users' notifications are NotFound."""
        with atomic(self.db, "update notification"):
            notification = self.facts.get_notification(recipient.id, notification_id)
            if notification is None:
                raise NotFoundError("Notification not found")
            notification.read = True
        return notification
