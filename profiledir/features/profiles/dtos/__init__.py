"""Profile directory data transfer objects."""

from .profiles_dto import (
    ListProfilesRequest,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
)
from .upload_dto import UploadResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UpdateProfileRequest",
    "ProfileResponse",
    "ListProfilesRequest",
    "UploadResponse",
]
