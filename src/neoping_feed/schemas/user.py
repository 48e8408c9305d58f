"""Profile Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileUpdateRequest(BaseModel):
    """Schema for updating the caller's profile; omitted fields are kept."""

    display_name: str | None = Field(
        None,
        min_length=1,
        max_length=100,
        description="Optional display name (1-100 characters)",
    )
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, description="Avatar image URL")
    email: str | None = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        """Reject obviously malformed email addresses."""
        if v is None:
            return v
        if "@" not in v or v.startswith("@") or v.endswith("@"):
            raise ValueError("Email must look like name@domain")
        return v


class ProfileResponse(BaseModel):
    """Response schema for user profile information."""

    username: str
    email: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
