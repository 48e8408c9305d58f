"""Feed assembly: paginated, filtered listings decorated for the viewer."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import NotFoundError
from neoping_feed.core.settings import settings
from neoping_feed.db.session import store_errors
from neoping_feed.models import ContentItem, ContentKind, User
from neoping_feed.repositories import (
    ContentRepository,
    FeedFilter,
    FeedOrder,
    InteractionRepository,
)
from neoping_feed.schemas.content import ContentView, FeedPage
from neoping_feed.services.content_service import to_content_view

logger = logging.getLogger(__name__)


def clamp_page_size(page_size: int | None) -> int:
    """Return a page size within ``1..settings.max_page_size``."""
    if page_size is None:
        return settings.default_page_size
    return max(1, min(page_size, settings.max_page_size))


def clamp_page(page: int) -> int:
    """Return a page index within ``0..settings.max_page_index``."""
    return max(0, min(page, settings.max_page_index))


class FeedAssembler:
    """Builds feed pages and single-item views for an optional viewer.

    Viewer flags are read in one batched query per fact table. When any read
    fails the whole request fails; pages are never returned with missing
    decoration.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.content = ContentRepository(db)
        self.facts = InteractionRepository(db)

    def get_feed(
        self,
        *,
        kind: ContentKind | None,
        category: str | None = None,
        search: str | None = None,
        page: int = 0,
        page_size: int | None = None,
        order: FeedOrder = FeedOrder.LATEST,
        viewer: User | None = None,
    ) -> FeedPage:
        """Return one page of the feed together with the total match count."""
        page = clamp_page(page)
        limit = clamp_page_size(page_size)
        feed_filter = FeedFilter.from_params(
            category,
            search,
            all_sentinel=settings.all_category_sentinel,
        )
        with store_errors("fetch feed"):
            items = self.content.list_page(feed_filter, page, limit, order, kind)
            total = self.content.count_matching(feed_filter, kind)
            views = self.decorate(items, viewer)

        offset = page * limit
        logger.debug(
            "Feed kind=%s filter=%s order=%s page=%d -> %d/%d",
            kind.value if kind else "all",
            feed_filter,
            order.value,
            page,
            len(views),
            total,
        )
        return FeedPage(
            items=views,
            total=total,
            page=page,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        )

    def get_item(
        self,
        item_id: int,
        *,
        kind: ContentKind | None = None,
        viewer: User | None = None,
    ) -> ContentView:
        """Return one decorated item or raise `NotFoundError`."""
        with store_errors("fetch content"):
            item = self.content.require(item_id, kind)
            return self.decorate([item], viewer)[0]

    def list_by_author(
        self,
        username: str,
        *,
        kind: ContentKind | None = ContentKind.POST,
        viewer: User | None = None,
    ) -> list[ContentView]:
        """Return everything ``username`` published, newest first."""
        with store_errors("fetch user content"):
            author = self.db.execute(
                select(User).where(User.username == username)
            ).scalars().first()
            if author is None:
                raise NotFoundError("User not found")
            items = self.content.list_by_author(username, kind)
            return self.decorate(items, viewer)

    def list_bookmarks(
        self,
        viewer: User,
        *,
        page: int = 0,
        page_size: int | None = None,
    ) -> FeedPage:
        """Return the viewer's saved items, most recently saved first."""
        page = clamp_page(page)
        limit = clamp_page_size(page_size)
        with store_errors("fetch bookmarks"):
            ids = self.facts.list_bookmarked_ids(viewer.id, page, limit)
            items = self.content.get_many(ids)
            total = self.facts.count_bookmarks(viewer.id)
            views = self.decorate(items, viewer)
        offset = page * limit
        return FeedPage(
            items=views,
            total=total,
            page=page,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        )

    def decorate(
        self,
        items: Sequence[ContentItem],
        viewer: User | None,
    ) -> list[ContentView]:
        """Attach liked/bookmarked flags for ``viewer`` to each item."""
        if viewer is None:
            return [to_content_view(item) for item in items]

        ids = [item.id for item in items]
        liked = self.facts.liked_item_ids(viewer.id, ids)
        bookmarked = self.facts.bookmarked_item_ids(viewer.id, ids)
        return [
            to_content_view(
                item,
                liked=item.id in liked,
                bookmarked=item.id in bookmarked,
            )
            for item in items
        ]
