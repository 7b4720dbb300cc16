"""Register use case module."""

from profiledir.features.profiles.repositories.errors import (
    DuplicateKeyError,
    StoreUnavailableError,
)
from profiledir.features.profiles.usecases.errors import InvalidInputError

from .register_usecase import CredentialHasher, RegisterUseCaseImpl

__all__ = [
    "RegisterUseCaseImpl",
    "CredentialHasher",
    "InvalidInputError",
    "DuplicateKeyError",
    "StoreUnavailableError",
]
