"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.orm import Session

from neoping_feed.core.exceptions import UnauthenticatedError
from neoping_feed.core.security import decode_access_token
from neoping_feed.db.session import get_db
from neoping_feed.models import User

# Missing credentials are allowed here; endpoints decide whether an actor is required.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User | None:
    """Resolve the current actor once per request.

    Returns None when no bearer token was sent. A token that is present but
    invalid, or names an unknown user, is rejected rather than ignored.

    Raises:
        UnauthenticatedError: If a token was sent and cannot be validated
    """
    if credentials is None:
        return None
    username = decode_access_token(credentials.credentials)
    if username is None:
        raise UnauthenticatedError("Could not validate credentials")
    user = db.execute(select(User).where(User.username == username)).scalars().first()
    if user is None:
        raise UnauthenticatedError("User not found")
    return user


def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Require an authenticated actor.

    Raises:
        UnauthenticatedError: If no actor could be resolved
    """
    if user is None:
        raise UnauthenticatedError()
    return user


# Type aliases for actor dependencies
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
