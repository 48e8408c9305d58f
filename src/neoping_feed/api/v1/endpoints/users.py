# src/neoping_feed/api/v1/endpoints/users.py
"""User profile endpoints."""

from fastapi import APIRouter

from neoping_feed.models import ContentKind
from neoping_feed.schemas.content import ContentView
from neoping_feed.schemas.user import ProfileResponse, ProfileUpdateRequest
from neoping_feed.services.feed import FeedAssembler
from neoping_feed.services.profile_service import get_profile, update_profile

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me/profile", response_model=ProfileResponse)
async def get_my_profile(current_user: CurrentUserDep) -> ProfileResponse:
    """Return the caller's own profile."""
    return ProfileResponse.model_validate(current_user)


@router.patch("/me/profile", response_model=ProfileResponse)
async def update_my_profile(
    payload: ProfileUpdateRequest,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> ProfileResponse:
    """Update the caller's profile; fields left out of the body are kept."""
    user = update_profile(db, current_user, payload)
    return ProfileResponse.model_validate(user)


@router.get("/{username}/profile", response_model=ProfileResponse)
async def get_user_profile(username: str, db: SessionDep) -> ProfileResponse:
    """Return a public profile.

    Raises:
        NotFoundError: If the user does not exist
    """
    return ProfileResponse.model_validate(get_profile(db, username))


@router.get("/{username}/posts", response_model=list[ContentView])
async def list_user_posts(
    username: str,
    db: SessionDep,
    viewer: OptionalUserDep,
) -> list[ContentView]:
    """List posts written by ``username``, newest first."""
    return FeedAssembler(db).list_by_author(username, kind=ContentKind.POST, viewer=viewer)
