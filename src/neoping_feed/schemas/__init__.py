"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .content import (
    BookmarkResponse,
    CommentCreate,
    CommentEnvelope,
    CommentList,
    CommentResponse,
    ContentCreate,
    ContentView,
    FeedPage,
    LikeResponse,
    VoteResponse,
)
from .notification import NotificationList, NotificationResponse
from .user import ProfileResponse, ProfileUpdateRequest

__all__ = [
    "BookmarkResponse",
    "CommentCreate", "CommentEnvelope", "CommentList", "CommentResponse",
    "ContentCreate", "ContentView", "FeedPage",
    "LikeResponse", "VoteResponse",
    "NotificationList", "NotificationResponse",
    "ProfileResponse", "ProfileUpdateRequest",
]
