"""Service layer: feed assembly, interactions, counters and profiles."""

from .counters import CounterMaintainer
from .feed import FeedAssembler
from .interactions import BookmarkResult, CommentResult, InteractionGateway, LikeResult
from .notifications import NotificationService

__all__ = [
    "BookmarkResult",
    "CommentResult",
    "CounterMaintainer",
    "FeedAssembler",
    "InteractionGateway",
    "LikeResult",
    "NotificationService",
]
