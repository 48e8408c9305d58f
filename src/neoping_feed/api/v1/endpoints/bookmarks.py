# src/neoping_feed/api/v1/endpoints/bookmarks.py
"""Saved content for the current user."""

from fastapi import APIRouter, Query

from neoping_feed.core.settings import settings
from neoping_feed.schemas.content import FeedPage
from neoping_feed.services.feed import FeedAssembler

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=FeedPage)
async def list_bookmarks(
    db: SessionDep,
    current_user: CurrentUserDep,
    page: int = Query(0, ge=0, le=settings.max_page_index),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
) -> FeedPage:
    """Return the caller's bookmarked posts and news, most recently saved first."""
    return FeedAssembler(db).list_bookmarks(current_user, page=page, page_size=limit)
