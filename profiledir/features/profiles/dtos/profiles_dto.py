"""Profile data transfer objects."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from profiledir.core.schemas import IdentifierMode


class RegisterRequest(BaseModel):
    """Request model for registering a new identity."""

    display_name: str = ""
    secret: str = ""
    identifier_mode: IdentifierMode
    identifier: str = ""
    avatar_ref: str | None = None
    about: str | None = None
    location: str | None = None


class LoginRequest(BaseModel):
    """Request model for authenticating with email or phone."""

    identifier_mode: IdentifierMode
    identifier: str = ""
    secret: str = ""


class UpdateProfileRequest(BaseModel):
    """Request model for a partial profile update.

    Omitted, empty and whitespace-only fields leave the stored value as is.
    """

    display_name: str | None = None
    email: str | None = None
    phone: str | None = None
    about: str | None = None
    location: str | None = None
    avatar_ref: str | None = None
    secret: str | None = None


class ProfileResponse(BaseModel):
    """Public view of an identity. Never carries the secret hash."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    display_name: str
    email: str | None = None
    phone: str | None = None
    about: str | None = None
    location: str | None = None
    avatar_ref: str | None = None
    created_at: datetime
    updated_at: datetime


class ListProfilesRequest(BaseModel):
    """Request model for listing the directory."""

    limit: int | None = Field(default=None, ge=1, le=500)
    offset: int = Field(default=0, ge=0)
