"""Content, feed and interaction Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContentCreate(BaseModel):
    """Schema for publishing a post or a news item."""

    title: str = Field(..., min_length=1, max_length=300, description="Headline or post title")
    body: str = Field("", max_length=20000, description="Post text or news excerpt")
    category: str | None = Field(None, max_length=64, description="Category tag")
    image_url: str | None = Field(None, description="Optional illustration URL")


class ContentView(BaseModel):
    """Content item decorated with flags relative to the viewer."""

    id: int
    kind: Literal["post", "news"]
    author: str
    title: str
    body: str
    image_url: str | None = None
    category: str | None = None
    created_at: datetime
    like_count: int
    upvotes: int
    comment_count: int
    liked_by_viewer: bool = False
    bookmarked_by_viewer: bool = False


class FeedPage(BaseModel):
    """One page of a feed listing."""

    success: bool = True
    items: list[ContentView]
    total: int = Field(..., description="Number of matching rows, independent of the page")
    page: int
    limit: int
    offset: int
    has_more: bool


class LikeResponse(BaseModel):
    """Outcome of a like toggle."""

    success: bool = True
    liked: bool
    likes_count: int
    message: str


class VoteResponse(BaseModel):
    """News score after an upvote or downvote."""

    success: bool = True
    upvotes: int


class BookmarkResponse(BaseModel):
    """Outcome of a bookmark request; `created` is false on a repeat."""

    success: bool = True
    bookmarked: bool = True
    created: bool


class CommentCreate(BaseModel):
    """Schema for adding a comment."""

    content: str = Field(..., description="Comment text, stored as given")


class CommentResponse(BaseModel):
    """Comment as returned to clients."""

    id: int
    content: str
    username: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentEnvelope(BaseModel):
    """Wrapper returned after a comment is created."""

    success: bool = True
    comment: CommentResponse
    comment_count: int


class CommentList(BaseModel):
    """Page of comments for an item, oldest first."""

    success: bool = True
    comments: list[CommentResponse]
