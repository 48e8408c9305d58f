"""SQLAlchemy models for the Neoping feed."""

from .content import ContentItem, ContentKind, News, Post
from .interaction import Bookmark, Comment, ContentLike
from .notification import Notification
from .user import User

__all__ = [
    "ContentItem", "ContentKind", "News", "Post",
    "Bookmark", "Comment", "ContentLike",
    "Notification",
    "User",
]
