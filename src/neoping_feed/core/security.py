"""Bearer token helpers for the authentication collaborator.

Only the verification side matters to the feed core; `create_access_token`
exists so that seed scripts and tests can mint tokens the same way the
identity service does.
"""
from __future__ import annotations

from datetime import timedelta

from jose import JWTError, jwt

from neoping_feed.core.settings import settings
from neoping_feed.db.time import utcnow


def create_access_token(username: str, expires_delta: timedelta | None = None) -> str:
    """Return a signed JWT whose subject is ``username``."""
    expire = utcnow() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode(
        {"sub": username, "exp": expire},
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> str | None:
    """Return the username carried by ``token``, or None if it is invalid."""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
