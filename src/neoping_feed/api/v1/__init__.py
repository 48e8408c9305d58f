# src/neoping_feed/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    bookmarks_router,
    news_router,
    notifications_router,
    posts_router,
    users_router,
)

__all__ = [
    "posts_router",
    "news_router",
    "bookmarks_router",
    "notifications_router",
    "users_router",
]
