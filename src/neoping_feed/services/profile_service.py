"""CRUD-style helpers for user profiles."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import NotFoundError
from neoping_feed.db.session import atomic, store_errors
from neoping_feed.models import User
from neoping_feed.schemas.user import ProfileUpdateRequest

__all__ = [
    "get_profile",
    "update_profile",
]

logger = logging.getLogger(__name__)


def get_profile(db: Session, username: str) -> User:
    """Return the user behind ``username`` or raise `NotFoundError`."""
    with store_errors("fetch profile"):
        user = db.execute(select(User).where(User.username == username)).scalars().first()
    if user is None:
        raise NotFoundError("Profile not found")
    return user


def update_profile(db: Session, user: User, update_data: ProfileUpdateRequest) -> User:
    """Apply partial updates to an existing user's profile."""
    changes = update_data.model_dump(exclude_unset=True)
    with atomic(db, "update profile"):
        for key, value in changes.items():
            setattr(user, key, value)
        db.add(user)
    db.refresh(user)
    logger.info("Profile for %s updated (%s)", user.username, ", ".join(sorted(changes)) or "no changes")
    return user
