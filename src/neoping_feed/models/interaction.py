"""Fact tables recording one user's interaction with a content item."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from neoping_feed.db.session import Base
from neoping_feed.db.time import utcnow
from neoping_feed.models.user import User


class ContentLike(Base):
    """Existence of a row means the user currently likes the item."""

    __tablename__ = "content_like"
    __table_args__ = (
        Index("ix_content_like_item_id", "content_item_id"),
    )

    # Composite primary key rejects a second like from the same user.
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    content_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("content_item.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class Bookmark(Base):
    """Saved item; created once and never removed."""

    __tablename__ = "bookmark"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    content_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("content_item.id", ondelete="CASCADE"),
        primary_key=True,
    )
    bookmarked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class Comment(Base):
    """Append-only comment on a content item."""

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_item_created", "content_item_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("content_item.id", ondelete="CASCADE"),
        nullable=False,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    author: Mapped[User] = relationship("User", lazy="joined")

    @property
    def username(self) -> str:
        return self.author.username
