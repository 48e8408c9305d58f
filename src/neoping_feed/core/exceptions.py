"""Domain exceptions raised by the feed core.

Each exception carries the HTTP status the API layer maps it to and a
message that is safe to show to untrusted callers.
"""

from __future__ import annotations

from fastapi import status


class FeedError(RuntimeError):
    """Base exception for all feed core failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(FeedError):
    """Raised when a referenced item, user or profile does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnauthenticatedError(FeedError):
    """Raised when an action requires an actor but none was resolved."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class InteractionNotSupportedError(FeedError):
    """Raised when an interaction does not apply to the content variant.

    Likes only apply to posts and votes only apply to news.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Interaction not supported for this content"


class PersistenceError(FeedError):
    """Raised when the store fails; the transaction has been rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to access the data store"


class ConflictError(PersistenceError):
    """Raised when a uniqueness constraint rejects a concurrent write."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflicting concurrent update, please retry"
