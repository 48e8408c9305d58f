"""Per-user interactions on content: likes, votes, bookmarks and comments."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import ConflictError, InteractionNotSupportedError
from neoping_feed.core.settings import settings
from neoping_feed.db.session import atomic, store_errors
from neoping_feed.models import Comment, ContentItem, ContentKind, User
from neoping_feed.models.notification import (
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_LIKE,
)
from neoping_feed.repositories import ContentRepository, InteractionRepository
from neoping_feed.services.counters import CounterMaintainer
from neoping_feed.services.feed import clamp_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeResult:
    """State of the (actor, item) like relation after a toggle."""

    liked: bool
    likes_count: int


@dataclass(frozen=True)
class BookmarkResult:
    """Whether a bookmark row was inserted by this call."""

    created: bool


@dataclass(frozen=True)
class CommentResult:
    """The stored comment and the item's comment count afterwards."""

    comment: Comment
    comment_count: int


class InteractionGateway:
    """Action surface for a resolved actor.

    Each public method is one transaction: the fact row change, the counter
    update and any notification commit together or not at all.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.content = ContentRepository(db)
        self.facts = InteractionRepository(db)

    def toggle_like(
        self,
        item_id: int,
        actor: User,
        kind: ContentKind | None = None,
    ) -> LikeResult:
        """Flip the actor's like on an item and return the recomputed count.

        A concurrent toggle by the same actor can make the insert collide
        with the composite primary key. The transaction is then rolled back
        and the toggle re-evaluated against the committed state.
        """
        attempts = max(1, settings.like_toggle_max_attempts)
        attempt = 0
        while True:
            attempt += 1
            try:
                with atomic(self.db, "toggle like"):
                    result = self._toggle_like_once(item_id, actor, kind)
            except ConflictError:
                if attempt >= attempts:
                    raise
                logger.warning(
                    "Like toggle on item %s collided, retrying (%d/%d)",
                    item_id,
                    attempt,
                    attempts,
                )
                continue
            logger.info(
                "Item %s %s by %s (likes=%d)",
                item_id,
                "liked" if result.liked else "unliked",
                actor.username,
                result.likes_count,
            )
            return result

    def upvote(self, item_id: int, actor: User, kind: ContentKind | None = None) -> int:
        """Add one to the item's score. Repeated votes all count."""
        return self._vote(item_id, actor, 1, kind)

    def downvote(self, item_id: int, actor: User, kind: ContentKind | None = None) -> int:
        """Subtract one from the item's score. Repeated votes all count."""
        return self._vote(item_id, actor, -1, kind)

    def bookmark(
        self,
        item_id: int,
        actor: User,
        kind: ContentKind | None = None,
    ) -> BookmarkResult:
        """Save the item for the actor; repeating the call changes nothing."""
        try:
            with atomic(self.db, "bookmark content"):
                item = self.content.require(item_id, kind)
                if self.facts.has_bookmark(actor.id, item.id):
                    return BookmarkResult(created=False)
                self.facts.add_bookmark(actor.id, item.id)
        except ConflictError:
            # A concurrent request inserted the same bookmark first.
            return BookmarkResult(created=False)
        logger.info("Item %s bookmarked by %s", item_id, actor.username)
        return BookmarkResult(created=True)

    def add_comment(
        self,
        item_id: int,
        actor: User,
        text: str,
        kind: ContentKind | None = None,
    ) -> CommentResult:
        """Append a comment and bump the item's comment count."""
        with atomic(self.db, "add comment"):
            item = self.content.require(item_id, kind)
            comment = self.facts.add_comment(item.id, actor.id, text)
            count = CounterMaintainer.increment_comments(self.db, item)
            self._notify(
                item,
                actor,
                NOTIFICATION_KIND_COMMENT,
                f"{actor.username} commented on your {item.content_kind.label.lower()}",
            )
        logger.info("Comment %s added to item %s by %s", comment.id, item_id, actor.username)
        return CommentResult(comment=comment, comment_count=count)

    def list_comments(
        self,
        item_id: int,
        *,
        kind: ContentKind | None = None,
        page: int = 0,
        page_size: int = 50,
    ) -> list[Comment]:
        """Return comments on an existing item, oldest first."""
        with store_errors("fetch comments"):
            item = self.content.require(item_id, kind)
            return self.facts.list_comments(item.id, clamp_page(page), page_size)

    def _toggle_like_once(
        self,
        item_id: int,
        actor: User,
        kind: ContentKind | None,
    ) -> LikeResult:
        # Concurrent toggles on the same item queue here, so the recount below
        # sees every like committed before this transaction took the lock.
        item = self.content.require(item_id, kind, for_update=True)
        if not item.supports_likes:
            raise InteractionNotSupportedError("Likes are only available on posts")

        existing = self.facts.find_like(actor.id, item.id)
        if existing is None:
            self.facts.add_like(actor.id, item.id)
            liked = True
        else:
            self.facts.delete_like(existing)
            liked = False

        count = CounterMaintainer.recompute_likes(self.db, item)
        if liked:
            self._notify(
                item,
                actor,
                NOTIFICATION_KIND_LIKE,
                f"{actor.username} liked your {item.content_kind.label.lower()}",
            )
        return LikeResult(liked=liked, likes_count=count)

    def _vote(
        self,
        item_id: int,
        actor: User,
        delta: int,
        kind: ContentKind | None,
    ) -> int:
        # No per-user vote facts exist for news; the score is a plain counter.
        with atomic(self.db, "record vote"):
            item = self.content.require(item_id, kind)
            if not item.supports_votes:
                raise InteractionNotSupportedError("Votes are only available on news")
            score = CounterMaintainer.adjust_upvotes(self.db, item, delta)
        logger.info(
            "Item %s %s by %s (score=%d)",
            item_id,
            "upvoted" if delta > 0 else "downvoted",
            actor.username,
            score,
        )
        return score

    def _notify(self, item: ContentItem, actor: User, kind: str, message: str) -> None:
        if item.author_id == actor.id:
            return
        self.facts.add_notification(
            recipient_id=item.author_id,
            kind=kind,
            message=message,
            item_id=item.id,
        )
