"""Data access helpers over the ORM models."""

from .content_repo import ContentRepository, FeedFilter, FeedOrder
from .interaction_repo import InteractionRepository

__all__ = ["ContentRepository", "FeedFilter", "FeedOrder", "InteractionRepository"]
