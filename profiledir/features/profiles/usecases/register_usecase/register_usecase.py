"""Use case for registering a new identity."""

import asyncio
import logging
from typing import Protocol

from profiledir.core.schemas import IdentifierMode
from profiledir.features.profiles.dtos import ProfileResponse, RegisterRequest
from profiledir.features.profiles.repositories.protocols import (
    IdentityStore,
    NewIdentity,
)
from profiledir.features.profiles.sanitizer import sanitize
from profiledir.features.profiles.usecases.errors import InvalidInputError

logger = logging.getLogger(__name__)


class CredentialHasher(Protocol):
    """Protocol for secret hashing operations."""

    def hash(self, secret: str) -> str:
        """Hash a secret."""
        ...


class RegisterUseCaseImpl:
    """Implementation of the register use case."""

    def __init__(
        self,
        credential_hasher: CredentialHasher,
        identity_store: IdentityStore,
    ):
        """Initialize the use case with dependencies.

        Args:
            credential_hasher: Service for hashing secrets
            identity_store: Store holding the identities
        """
        self.credential_hasher = credential_hasher
        self.identity_store = identity_store

    async def execute(self, request: RegisterRequest) -> ProfileResponse:
        """Create a new identity bound to an email or a phone number.

        Args:
            request: The registration request

        Returns:
            The sanitized persisted profile

        Raises:
            InvalidInputError: If display name, secret or identifier is empty
            DuplicateKeyError: If the identifier is already registered
            StoreUnavailableError: If the store fails
        """
        display_name = request.display_name.strip()
        identifier = request.identifier.strip()

        if not display_name:
            raise InvalidInputError("Display name is required", field="display_name")
        if not request.secret:
            raise InvalidInputError("Secret is required", field="secret")
        if not identifier:
            raise InvalidInputError(
                f"{request.identifier_mode.value.capitalize()} is required",
                field="identifier",
            )

        secret_hash = await asyncio.to_thread(self.credential_hasher.hash, request.secret)

        record: NewIdentity = {"display_name": display_name, "secret_hash": secret_hash}
        if request.identifier_mode is IdentifierMode.EMAIL:
            record["email"] = identifier
        else:
            record["phone"] = identifier

        if request.avatar_ref:
            record["avatar_ref"] = request.avatar_ref
        if request.about:
            record["about"] = request.about
        if request.location:
            record["location"] = request.location

        identity = await self.identity_store.insert(record)
        logger.info(
            "Registered identity %s by %s", identity.id, request.identifier_mode.value
        )

        return sanitize(identity)
