# src/neoping_feed/api/v1/endpoints/news.py
"""News endpoints: feed, publishing, votes, comments and bookmarks."""

from fastapi import APIRouter, Query, status

from neoping_feed.core.settings import settings
from neoping_feed.models import ContentKind
from neoping_feed.repositories import FeedOrder
from neoping_feed.schemas.content import (
    BookmarkResponse,
    CommentCreate,
    CommentEnvelope,
    CommentList,
    CommentResponse,
    ContentCreate,
    ContentView,
    FeedPage,
    VoteResponse,
)
from neoping_feed.services.content_service import create_content, to_content_view
from neoping_feed.services.feed import FeedAssembler
from neoping_feed.services.interactions import InteractionGateway

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/news", tags=["news"])


@router.get("", response_model=FeedPage)
async def list_news(
    db: SessionDep,
    viewer: OptionalUserDep,
    category: str = Query("All", description='Category filter; "All" disables it'),
    search: str | None = Query(None, description="Free-text match on title or body"),
    page: int = Query(0, ge=0, le=settings.max_page_index),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    order: FeedOrder = Query(FeedOrder.LATEST),
) -> FeedPage:
    """List news items. A category filter wins over a search query."""
    return FeedAssembler(db).get_feed(
        kind=ContentKind.NEWS,
        category=category,
        search=search,
        page=page,
        page_size=limit,
        order=order,
        viewer=viewer,
    )


@router.get("/{news_id}", response_model=ContentView)
async def get_news(news_id: int, db: SessionDep, viewer: OptionalUserDep) -> ContentView:
    """Get a single news item by ID."""
    return FeedAssembler(db).get_item(news_id, kind=ContentKind.NEWS, viewer=viewer)


@router.post("", response_model=ContentView, status_code=status.HTTP_201_CREATED)
async def create_news(
    payload: ContentCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> ContentView:
    """Publish a news item."""
    item = create_content(db, kind=ContentKind.NEWS, author=current_user, payload=payload)
    return to_content_view(item)


@router.post("/{news_id}/upvote", response_model=VoteResponse)
async def upvote_news(news_id: int, db: SessionDep, current_user: CurrentUserDep) -> VoteResponse:
    score = InteractionGateway(db).upvote(news_id, current_user, kind=ContentKind.NEWS)
    return VoteResponse(upvotes=score)


@router.post("/{news_id}/downvote", response_model=VoteResponse)
async def downvote_news(
    news_id: int,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> VoteResponse:
    score = InteractionGateway(db).downvote(news_id, current_user, kind=ContentKind.NEWS)
    return VoteResponse(upvotes=score)


@router.get("/{news_id}/comments", response_model=CommentList)
async def list_news_comments(
    news_id: int,
    db: SessionDep,
    page: int = Query(0, ge=0, le=settings.max_page_index),
    limit: int = Query(50, ge=1, le=settings.max_page_size),
) -> CommentList:
    """Return comments on a news item, oldest first."""
    comments = InteractionGateway(db).list_comments(
        news_id,
        kind=ContentKind.NEWS,
        page=page,
        page_size=limit,
    )
    return CommentList(comments=[CommentResponse.model_validate(c) for c in comments])


@router.post("/{news_id}/comment", response_model=CommentEnvelope)
@router.post("/{news_id}/comments", response_model=CommentEnvelope, include_in_schema=False)
async def comment_on_news(
    news_id: int,
    payload: CommentCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> CommentEnvelope:
    """Add a comment to a news item and return the new comment count."""
    result = InteractionGateway(db).add_comment(
        news_id,
        current_user,
        payload.content,
        kind=ContentKind.NEWS,
    )
    return CommentEnvelope(
        comment=CommentResponse.model_validate(result.comment),
        comment_count=result.comment_count,
    )


@router.post("/{news_id}/bookmark", response_model=BookmarkResponse)
async def bookmark_news(
    news_id: int,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> BookmarkResponse:
    """Save a news item for the caller; repeating is a no-op."""
    result = InteractionGateway(db).bookmark(news_id, current_user, kind=ContentKind.NEWS)
    return BookmarkResponse(created=result.created)
