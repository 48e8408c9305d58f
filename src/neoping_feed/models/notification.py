"""Model for notifications delivered to content authors."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from neoping_feed.db.session import Base
from neoping_feed.db.time import utcnow

NOTIFICATION_KIND_LIKE = "like"
NOTIFICATION_KIND_COMMENT = "comment"


class Notification(Base):
    """Append-only notice for a recipient, read back newest-first."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_created", "recipient_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    content_item_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("content_item.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
