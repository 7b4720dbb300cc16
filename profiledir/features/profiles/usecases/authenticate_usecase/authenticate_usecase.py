"""Use case for authenticating an identity with its secret."""

import asyncio
import logging
from typing import Protocol

from profiledir.core.schemas import IdentifierMode
from profiledir.features.profiles.dtos import ProfileResponse
from profiledir.features.profiles.repositories.protocols import IdentityStore
from profiledir.features.profiles.sanitizer import sanitize
from profiledir.features.profiles.usecases.errors import (
    InvalidCredentialsError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    """Protocol for secret verification operations."""

    def verify(self, secret: str, digest: str | None) -> bool:
        """Verify a secret against its digest."""
        ...

    def dummy_verify(self) -> None:
        """Spend the time of a verification without a digest."""
        ...


class AuthenticateUseCaseImpl:
    """Implementation of the authenticate use case.

    No session or token is produced; the caller receives the sanitized
    profile and decides what "logged in" means.
    """

    def __init__(
        self,
        credential_verifier: CredentialVerifier,
        identity_store: IdentityStore,
    ):
        """Initialize the use case with dependencies.

        Args:
            credential_verifier: Service for verifying secrets
            identity_store: Store holding the identities
        """
        self.credential_verifier = credential_verifier
        self.identity_store = identity_store

    async def execute(
        self, identifier_mode: IdentifierMode, identifier: str, secret: str
    ) -> ProfileResponse:
        """Check a secret against the identity holding the identifier.

        Args:
            identifier_mode: Whether the identifier is an email or a phone number
            identifier: The email or phone number
            secret: The plaintext secret

        Returns:
            The sanitized profile

        Raises:
            InvalidInputError: If identifier or secret is empty
            InvalidCredentialsError: If no identity matches or the secret is wrong
            StoreUnavailableError: If the store fails
        """
        identifier = identifier.strip()
        if not identifier or not secret:
            raise InvalidInputError("Provide email/phone and secret")

        if identifier_mode is IdentifierMode.EMAIL:
            identity = await self.identity_store.find_by_email(identifier)
        else:
            identity = await self.identity_store.find_by_phone(identifier)

        if identity is None:
            await asyncio.to_thread(self.credential_verifier.dummy_verify)
            logger.info("Authentication failed by %s", identifier_mode.value)
            raise InvalidCredentialsError()

        verified = await asyncio.to_thread(
            self.credential_verifier.verify, secret, identity.secret_hash
        )
        if not verified:
            logger.info("Authentication failed by %s", identifier_mode.value)
            raise InvalidCredentialsError()

        logger.info("Authenticated identity %s", identity.id)
        return sanitize(identity)
