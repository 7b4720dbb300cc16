"""Update profile use case module."""

from profiledir.features.profiles.repositories.errors import (
    DuplicateKeyError,
    StoreUnavailableError,
)
from profiledir.features.profiles.usecases.errors import ProfileNotFoundError

from .update_profile_usecase import CredentialHasher, UpdateProfileUseCaseImpl

__all__ = [
    "UpdateProfileUseCaseImpl",
    "CredentialHasher",
    "ProfileNotFoundError",
    "DuplicateKeyError",
    "StoreUnavailableError",
]
