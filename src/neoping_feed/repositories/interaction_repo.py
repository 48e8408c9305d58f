"""Data access helpers for like, bookmark, comment and notification facts."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from neoping_feed.models import Bookmark, Comment, ContentLike, Notification

__all__ = ["InteractionRepository"]


class InteractionRepository:
    """Reads and writes the per-user fact tables."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    # Likes

    def find_like(self, user_id: int, item_id: int) -> ContentLike | None:
        return self.session.get(ContentLike, (user_id, item_id))

    def add_like(self, user_id: int, item_id: int) -> ContentLike:
        """Insert a like and flush so the uniqueness constraint fires now."""
        like = ContentLike(user_id=user_id, content_item_id=item_id)
        self.session.add(like)
        self.session.flush()
        return like

    def delete_like(self, like: ContentLike) -> None:
        self.session.delete(like)
        self.session.flush()

    def count_likes(self, item_id: int) -> int:
        return int(
            self.session.execute(
                select(func.count()).select_from(ContentLike).where(
                    ContentLike.content_item_id == item_id
                )
            ).scalar()
            or 0
        )

    def liked_item_ids(self, user_id: int, item_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``item_ids`` liked by the user."""
        ids = list(item_ids)
        if not ids:
            return set()
        rows = self.session.execute(
            select(ContentLike.content_item_id).where(
                ContentLike.user_id == user_id,
                ContentLike.content_item_id.in_(ids),
            )
        ).scalars()
        return set(rows)

    # Bookmarks

    def has_bookmark(self, user_id: int, item_id: int) -> bool:
        return self.session.get(Bookmark, (user_id, item_id)) is not None

    def add_bookmark(self, user_id: int, item_id: int) -> Bookmark:
        bookmark = Bookmark(user_id=user_id, content_item_id=item_id)
        self.session.add(bookmark)
        self.session.flush()
        return bookmark

    def count_bookmarks(self, user_id: int, item_id: int | None = None) -> int:
        stmt = select(func.count()).select_from(Bookmark).where(Bookmark.user_id == user_id)
        if item_id is not None:
            stmt = stmt.where(Bookmark.content_item_id == item_id)
        return int(self.session.execute(stmt).scalar() or 0)

    def bookmarked_item_ids(self, user_id: int, item_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``item_ids`` bookmarked by the user."""
        ids = list(item_ids)
        if not ids:
            return set()
        rows = self.session.execute(
            select(Bookmark.content_item_id).where(
                Bookmark.user_id == user_id,
                Bookmark.content_item_id.in_(ids),
            )
        ).scalars()
        return set(rows)

    def list_bookmarked_ids(self, user_id: int, page: int, page_size: int) -> list[int]:
        """Return bookmarked item ids, most recently saved first."""
        rows = self.session.execute(
            select(Bookmark.content_item_id)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.bookmarked_at.desc(), Bookmark.content_item_id.desc())
            .offset(page * page_size)
            .limit(page_size)
        ).scalars()
        return list(rows)

    # Comments

    def add_comment(self, item_id: int, author_id: int, content: str) -> Comment:
        comment = Comment(content_item_id=item_id, author_id=author_id, content=content)
        self.session.add(comment)
        self.session.flush()
        return comment

    def list_comments(self, item_id: int, page: int, page_size: int) -> list[Comment]:
        """Return comments on an item, oldest first."""
        rows = self.session.execute(
            select(Comment)
            .where(Comment.content_item_id == item_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .offset(page * page_size)
            .limit(page_size)
        ).scalars()
        return list(rows)

    def count_comments(self, item_id: int) -> int:
        return int(
            self.session.execute(
                select(func.count()).select_from(Comment).where(
                    Comment.content_item_id == item_id
                )
            ).scalar()
            or 0
        )

    # Notifications

    def add_notification(
        self,
        *,
        recipient_id: int,
        kind: str,
        message: str,
        item_id: int | None,
    ) -> Notification:
        notification = Notification(
            recipient_id=recipient_id,
            kind=kind,
            message=message,
            content_item_id=item_id,
        )
        self.session.add(notification)
        self.session.flush()
        return notification

    def list_notifications(self, recipient_id: int, page: int, page_size: int) -> list[Notification]:
        """Return a recipient's notifications, newest first."""
        rows = self.session.execute(
            select(Notification)
            .where(Notification.recipient_id == recipient_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .offset(page * page_size)
            .limit(page_size)
        ).scalars()
        return list(rows)

    def count_unread(self, recipient_id: int) -> int:
        return int(
            self.session.execute(
                select(func.count()).select_from(Notification).where(
                    Notification.recipient_id == recipient_id,
                    Notification.read.is_(False),
                )
            ).scalar()
            or 0
        )

    def get_notification(self, recipient_id: int, notification_id: int) -> Notification | None:
        return self.session.execute(
            select(Notification).where(
                Notification.id == notification_id,
                Notification.recipient_id == recipient_id,
            )
        ).scalars().first()
