"""SQLAlchemy models for feed content: posts and news items."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from neoping_feed.db.session import Base
from neoping_feed.db.time import utcnow
from neoping_feed.models.user import User


class ContentKind(str, Enum):
    """Discriminator values for the content variants."""

    POST = "post"
    NEWS = "news"

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        return "Post" if self is ContentKind.POST else "News"


class ContentItem(Base):
    """Listable, interactable content shared by posts and news.

    Both variants live in one table. The counters are denormalized
    projections over the fact tables (likes, comments); ``upvotes`` is a raw
    signed score with no backing facts.
    """

    __tablename__ = "content_item"
    __table_args__ = (
        Index("ix_content_item_kind_created", "kind", "created_at"),
        Index("ix_content_item_category", "category"),
    )

    # Per-variant interaction capabilities.
    supports_likes: ClassVar[bool] = False
    supports_votes: ClassVar[bool] = False

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(String(16), nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # Post text, or the excerpt for news.
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    like_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    upvotes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    comment_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    author: Mapped[User] = relationship("User", lazy="joined")

    __mapper_args__ = {"polymorphic_on": "kind"}

    @hybrid_property
    def popularity(self) -> int:
        """Ranking score for the popular ordering."""
        return self.like_count + self.upvotes

    @property
    def content_kind(self) -> ContentKind:
        return ContentKind(self.kind)

    @property
    def author_username(self) -> str:
        return self.author.username


class Post(ContentItem):
    """User-authored post; likes are backed by per-user facts."""

    supports_likes = True

    __mapper_args__ = {"polymorphic_identity": ContentKind.POST.value}


class News(ContentItem):
    """News article; carries a raw up/down score without per-user facts."""

    supports_votes = True

    __mapper_args__ = {"polymorphic_identity": ContentKind.NEWS.value}
