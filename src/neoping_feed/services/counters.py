"""Maintenance of the denormalized counters stored on content items."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from neoping_feed.models import ContentItem, ContentLike


class CounterMaintainer:
    """Keeps like, vote and comment counters in step with their facts.

    Every method issues its UPDATE through the caller's session and flushes,
    so the counter change commits or rolls back together with the fact row
    change made in the same transaction.
    """

    @staticmethod
    def recompute_likes(db: Session, item: ContentItem) -> int:
        """Set ``like_count`` to the number of like rows for the item.

        The caller must have flushed the like insert or delete first.
        """
        item.like_count = (
            select(func.count())
            .select_from(ContentLike)
            .where(ContentLike.content_item_id == item.id)
            .scalar_subquery()
        )
        db.flush()
        return item.like_count

    @staticmethod
    def adjust_upvotes(db: Session, item: ContentItem, delta: int) -> int:
        """Apply a signed increment to the raw vote score."""
        item.upvotes = ContentItem.upvotes + delta
        db.flush()
        return item.upvotes

    @staticmethod
    def increment_comments(db: Session, item: ContentItem) -> int:
        """Count one more comment on the item."""
        item.comment_count = ContentItem.comment_count + 1
        db.flush()
        return item.comment_count
