# src/neoping_feed/api/v1/endpoints/posts.py
"""Post-related endpoints for the Neoping API."""

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
    LikeResponse,
)
from neoping_feed.services.content_service import create_content, to_content_view
from neoping_feed.services.feed import FeedAssembler
from neoping_feed.services.interactions import InteractionGateway

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])

PageQuery = Query(0, ge=0, le=settings.max_page_index, description="Zero-based page index")
LimitQuery = Query(
    settings.default_page_size,
    ge=1,
    le=settings.max_page_size,
    description="Page size",
)


@router.get("", response_model=FeedPage)
async def list_posts(
    db: SessionDep,
    viewer: OptionalUserDep,
    category: str = Query("All", description='Category filter; "All" disables it'),
    search: str | None = Query(None, description="Free-text match on title or body"),
    page: int = PageQuery,
    limit: int = LimitQuery,
    order: FeedOrder = Query(FeedOrder.LATEST, description="latest or popular"),
) -> FeedPage:
    """List posts with optional filtering, ordering and viewer flags."""
    return FeedAssembler(db).get_feed(
        kind=ContentKind.POST,
        category=category,
        search=search,
        page=page,
        page_size=limit,
        order=order,
        viewer=viewer,
    )


@router.get("/popular", response_model=FeedPage)
async def list_popular_posts(
    db: SessionDep,
    viewer: OptionalUserDep,
    category: str = Query("All"),
    page: int = PageQuery,
    limit: int = LimitQuery,
) -> FeedPage:
    """List posts ordered by like count, highest first."""
    return FeedAssembler(db).get_feed(
        kind=ContentKind.POST,
        category=category,
        page=page,
        page_size=limit,
        order=FeedOrder.POPULAR,
        viewer=viewer,
    )


@router.get("/latest", response_model=FeedPage)
async def list_latest_posts(
    db: SessionDep,
    viewer: OptionalUserDep,
    search: str | None = Query(None),
    page: int = PageQuery,
    limit: int = LimitQuery,
) -> FeedPage:
    """List the newest posts, optionally narrowed by a search query."""
    return FeedAssembler(db).get_feed(
        kind=ContentKind.POST,
        search=search,
        page=page,
        page_size=limit,
        order=FeedOrder.LATEST,
        viewer=viewer,
    )


@router.get("/category/{category}", response_model=FeedPage)
async def list_posts_by_category(
    category: str,
    db: SessionDep,
    viewer: OptionalUserDep,
    page: int = PageQuery,
    limit: int = LimitQuery,
) -> FeedPage:
    """List posts in one category (case-insensitive)."""
    return FeedAssembler(db).get_feed(
        kind=ContentKind.POST,
        category=category,
        page=page,
        page_size=limit,
        viewer=viewer,
    )


@router.get("/by-user/{username}", response_model=list[ContentView])
async def list_posts_by_user(
    username: str,
    db: SessionDep,
    viewer: OptionalUserDep,
) -> list[ContentView]:
    """List every post written by ``username``."""
    return FeedAssembler(db).list_by_author(username, kind=ContentKind.POST, viewer=viewer)


@router.get("/user/me", response_model=list[ContentView])
async def list_my_posts(db: SessionDep, current_user: CurrentUserDep) -> list[ContentView]:
    """List the caller's own posts."""
    return FeedAssembler(db).list_by_author(
        current_user.username,
        kind=ContentKind.POST,
        viewer=current_user,
    )


@router.get("/{post_id}", response_model=ContentView)
async def get_post(post_id: int, db: SessionDep, viewer: OptionalUserDep) -> ContentView:
    """Get a specific post by ID.

    Raises:
        NotFoundError: If the post does not exist
    """
    return FeedAssembler(db).get_item(post_id, kind=ContentKind.POST, viewer=viewer)


@router.post("", response_model=ContentView, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: ContentCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> ContentView:
    """Publish a new post for the caller."""
    post = create_content(db, kind=ContentKind.POST, author=current_user, payload=payload)
    return to_content_view(post)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(post_id: int, db: SessionDep, current_user: CurrentUserDep) -> LikeResponse:
    """Like the post, or remove the caller's like if already present."""
    result = InteractionGateway(db).toggle_like(post_id, current_user, kind=ContentKind.POST)
    return LikeResponse(
        liked=result.liked,
        likes_count=result.likes_count,
        message="Post liked" if result.liked else "Like removed",
    )


@router.get("/{post_id}/comments", response_model=CommentList)
async def list_comments(
    post_id: int,
    db: SessionDep,
    page: int = PageQuery,
    limit: int = Query(50, ge=1, le=settings.max_page_size),
) -> CommentList:
    """Return comments on a post, oldest first."""
    comments = InteractionGateway(db).list_comments(
        post_id,
        kind=ContentKind.POST,
        page=page,
        page_size=limit,
    )
    return CommentList(comments=[CommentResponse.model_validate(c) for c in comments])


@router.post("/{post_id}/comments", response_model=CommentEnvelope)
async def add_comment(
    post_id: int,
    payload: CommentCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> CommentEnvelope:
    """Add a comment to a post."""
    result = InteractionGateway(db).add_comment(
        post_id,
        current_user,
        payload.content,
        kind=ContentKind.POST,
    )
    return CommentEnvelope(
        comment=CommentResponse.model_validate(result.comment),
        comment_count=result.comment_count,
    )


@router.post("/{post_id}/bookmark", response_model=BookmarkResponse)
async def bookmark_post(
    post_id: int,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> BookmarkResponse:
    """Save a post for the caller; repeating is a no-op."""
    result = InteractionGateway(db).bookmark(post_id, current_user, kind=ContentKind.POST)
    return BookmarkResponse(created=result.created)
