# src/neoping_feed/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .bookmarks import router as bookmarks_router
from .news import router as news_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "posts_router",
    "news_router",
    "bookmarks_router",
    "notifications_router",
    "users_router",
]
