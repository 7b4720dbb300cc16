"""Authenticate use case module."""

from profiledir.features.profiles.repositories.errors import StoreUnavailableError
from profiledir.features.profiles.usecases.errors import (
    InvalidCredentialsError,
    InvalidInputError,
)

from .authenticate_usecase import AuthenticateUseCaseImpl, CredentialVerifier

__all__ = [
    "AuthenticateUseCaseImpl",
    "CredentialVerifier",
    "InvalidCredentialsError",
    "InvalidInputError",
    "StoreUnavailableError",
]
