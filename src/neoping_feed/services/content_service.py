"""Service-level helpers for publishing content and rendering it."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from neoping_feed.db.session import atomic
from neoping_feed.models import ContentItem, ContentKind, User
from neoping_feed.repositories import ContentRepository
from neoping_feed.schemas.content import ContentCreate, ContentView

logger = logging.getLogger(__name__)


def create_content(
    db: Session,
    *,
    kind: ContentKind,
    author: User,
    payload: ContentCreate,
) -> ContentItem:
    """Persist a new post or news item with zeroed counters.

    Args:
        db: Request-scoped session; committed on success.
        kind: Which variant to create.
        author: Authenticated author.
        payload: Validated title, body, category and image.

    Returns:
        The persisted item.
    """
    repo = ContentRepository(db)
    with atomic(db, f"create {kind.label.lower()}"):
        item = repo.create(
            kind=kind,
            author=author,
            title=payload.title,
            body=payload.body,
            category=payload.category,
            image_url=payload.image_url,
        )
    logger.info("%s %s created by %s", kind.label, item.id, author.username)
    return item


def to_content_view(
    item: ContentItem,
    *,
    liked: bool = False,
    bookmarked: bool = False,
) -> ContentView:
    """Convert a ContentItem ORM instance to an API schema."""
    return ContentView(
        id=item.id,
        kind=item.kind,
        author=item.author_username,
        title=item.title,
        body=item.body,
        image_url=item.image_url,
        category=item.category,
        created_at=item.created_at,
        like_count=item.like_count,
        upvotes=item.upvotes,
        comment_count=item.comment_count,
        liked_by_viewer=liked,
        bookmarked_by_viewer=bookmarked,
    )
