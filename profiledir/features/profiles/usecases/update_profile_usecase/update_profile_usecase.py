"""Use case for partially updating a profile."""

import asyncio
import logging
from typing import Any, Protocol
from uuid import UUID

from profiledir.features.profiles.dtos import ProfileResponse, UpdateProfileRequest
from profiledir.features.profiles.repositories.protocols import IdentityStore
from profiledir.features.profiles.sanitizer import sanitize
from profiledir.features.profiles.usecases.errors import ProfileNotFoundError

logger = logging.getLogger(__name__)

# Stored with surrounding whitespace removed
TRIMMED_FIELDS = ("display_name", "email", "phone")
# Stored exactly as given
VERBATIM_FIELDS = ("about", "location", "avatar_ref")


class CredentialHasher(Protocol):
    """Protocol for secret hashing operations."""

    def hash(self, secret: str) -> str:
        """Hash a secret."""
        ...


def _provided(value: str | None) -> bool:
    return value is not None and bool(value.strip())


class UpdateProfileUseCaseImpl:
    """Implementation of the update profile use case.

    Replace-if-provided merge: a field is written only when the request
    carries a non-blank value for it, so this operation cannot clear a field.
    """

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

    async def execute(
        self, identity_id: UUID, request: UpdateProfileRequest
    ) -> ProfileResponse:
        """Merge the provided fields into an identity.

        Args:
            identity_id: The UUID of the identity to update
            request: The fields to apply

        Returns:
            The sanitized post-update profile

        Raises:
            ProfileNotFoundError: If the identity does not exist
            DuplicateKeyError: If the new email or phone belongs to another identity
            StoreUnavailableError: If the store fails
        """
        fields: dict[str, Any] = {}

        for name in TRIMMED_FIELDS:
            value = getattr(request, name)
            if _provided(value):
                fields[name] = value.strip()

        for name in VERBATIM_FIELDS:
            value = getattr(request, name)
            if _provided(value):
                fields[name] = value

        if _provided(request.secret):
            fields["secret_hash"] = await asyncio.to_thread(
                self.credential_hasher.hash, request.secret
            )

        if fields:
            identity = await self.identity_store.update_by_id(identity_id, fields)
        else:
            identity = await self.identity_store.find_by_id(identity_id)

        if identity is None:
            raise ProfileNotFoundError()

        logger.info(
            "Updated identity %s (%s)",
            identity_id,
            ", ".join(sorted(fields)) or "no changes",
        )
        return sanitize(identity)
