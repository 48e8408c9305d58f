"""Data access helpers for posts and news items."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import NotFoundError
from neoping_feed.models import ContentItem, ContentKind, News, Post, User

__all__ = ["ContentRepository", "FeedFilter", "FeedOrder"]

_VARIANTS: dict[ContentKind, type[ContentItem]] = {
    ContentKind.POST: Post,
    ContentKind.NEWS: News,
}


class FeedOrder(str, Enum):
    """Supported orderings for feed listings."""

    LATEST = "latest"
    POPULAR = "popular"


@dataclass(frozen=True)
class FeedFilter:
    """Exactly one of: a category, a free-text query, or nothing."""

    category: str | None = None
    search: str | None = None

    @classmethod
    def from_params(
        cls,
        category: str | None,
        search: str | None,
        *,
        all_sentinel: str = "All",
    ) -> FeedFilter:
        """Normalize raw query parameters.

        The sentinel (any case) or a blank value means no category. A
        category takes precedence over a search query.
        """
        category = (category or "").strip()
        if category and category.lower() != all_sentinel.lower():
            return cls(category=category)
        search = (search or "").strip()
        if search:
            return cls(search=search)
        return cls()


def variant_for(kind: ContentKind | None) -> type[ContentItem]:
    """Return the mapped class for ``kind``; None means both variants."""
    if kind is None:
        return ContentItem
    return _VARIANTS[kind]


class ContentRepository:
    """Thin wrapper around database access for content items."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(
        self,
        *,
        kind: ContentKind,
        author: User,
        title: str,
        body: str = "",
        category: str | None = None,
        image_url: str | None = None,
    ) -> ContentItem:
        """Insert a new item and return the persisted ORM instance."""
        item = variant_for(kind)(
            author_id=author.id,
            title=title,
            body=body,
            category=category,
            image_url=image_url,
            like_count=0,
            upvotes=0,
            comment_count=0,
        )
        self.session.add(item)
        self.session.flush()
        return item

    def get_by_id(
        self,
        item_id: int,
        kind: ContentKind | None = None,
        *,
        for_update: bool = False,
    ) -> ContentItem | None:
        """Return an item by identifier, optionally restricted to one variant.

        With ``for_update`` the content row stays locked until the caller's
        transaction ends, and the returned instance is reloaded from the row.
        """
        return self.session.execute(
            self.by_id_statement(item_id, kind, for_update=for_update)
        ).scalars().first()

    def require(
        self,
        item_id: int,
        kind: ContentKind | None = None,
        *,
        for_update: bool = False,
    ) -> ContentItem:
        """Return an item or raise `NotFoundError`."""
        item = self.get_by_id(item_id, kind, for_update=for_update)
        if item is None:
            label = kind.label if kind is not None else "Content"
            raise NotFoundError(f"{label} not found")
        return item

    @staticmethod
    def by_id_statement(
        item_id: int,
        kind: ContentKind | None = None,
        *,
        for_update: bool = False,
    ) -> Select:
        """Build the single-item lookup used by `get_by_id`."""
        model = variant_for(kind)
        stmt = select(model).where(model.id == item_id)
        if for_update:
            # Lock only content_item; the author join is an outer join.
            stmt = stmt.with_for_update(of=model).execution_options(populate_existing=True)
        return stmt

    def list_page(
        self,
        feed_filter: FeedFilter,
        page: int,
        page_size: int,
        order: FeedOrder = FeedOrder.LATEST,
        kind: ContentKind | None = None,
    ) -> list[ContentItem]:
        """Return one offset page of matching items."""
        model = variant_for(kind)
        stmt = self._apply_filter(select(model), model, feed_filter, kind)
        if order is FeedOrder.POPULAR:
            stmt = stmt.order_by(
                model.popularity.desc(),
                model.created_at.desc(),
                model.id.desc(),
            )
        else:
            stmt = stmt.order_by(model.created_at.desc(), model.id.desc())
        stmt = stmt.offset(page * page_size).limit(page_size)
        return list(self.session.execute(stmt).scalars().unique())

    def count_matching(self, feed_filter: FeedFilter, kind: ContentKind | None = None) -> int:
        """Return the number of items matching the filter, ignoring paging."""
        model = variant_for(kind)
        stmt = self._apply_filter(
            select(func.count()).select_from(model),
            model,
            feed_filter,
            kind,
        )
        return int(self.session.execute(stmt).scalar() or 0)

    def list_by_author(
        self,
        username: str,
        kind: ContentKind | None = None,
    ) -> list[ContentItem]:
        """Return every item written by ``username``, newest first."""
        model = variant_for(kind)
        stmt = (
            select(model)
            .join(User, User.id == model.author_id)
            .where(User.username == username)
            .order_by(model.created_at.desc(), model.id.desc())
        )
        return list(self.session.execute(stmt).scalars().unique())

    def get_many(self, item_ids: list[int]) -> list[ContentItem]:
        """Return items for ``item_ids`` in the order given."""
        if not item_ids:
            return []
        rows = self.session.execute(
            select(ContentItem).where(ContentItem.id.in_(item_ids))
        ).scalars().unique()
        by_id = {item.id: item for item in rows}
        return [by_id[item_id] for item_id in item_ids if item_id in by_id]

    @staticmethod
    def _apply_filter(
        stmt: Select,
        model: type[ContentItem],
        feed_filter: FeedFilter,
        kind: ContentKind | None = None,
    ) -> Select:
        if kind is not None:
            stmt = stmt.where(model.kind == kind.value)
        if feed_filter.category is not None:
            return stmt.where(func.lower(model.category) == feed_filter.category.lower())
        if feed_filter.search is not None:
            # Literal substring match; % and _ in the query are not wildcards.
            text = feed_filter.search
            return stmt.where(
                or_(
                    model.title.icontains(text, autoescape=True),
                    model.body.icontains(text, autoescape=True),
                )
            )
        return stmt
