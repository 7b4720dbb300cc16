"""Use case for retrieving a single profile."""

from uuid import UUID

from profiledir.features.profiles.dtos import ProfileResponse
from profiledir.features.profiles.repositories.protocols import IdentityStore
from profiledir.features.profiles.sanitizer import sanitize
from profiledir.features.profiles.usecases.errors import ProfileNotFoundError


class GetProfileUseCaseImpl:
    """Implementation of the get profile use case."""

    def __init__(self, identity_store: IdentityStore):
        self.identity_store = identity_store

    async def execute(self, identity_id: UUID) -> ProfileResponse:
        """Get a sanitized profile by id.

        Raises:
            ProfileNotFoundError: If the identity does not exist
        """
        identity = await self.identity_store.find_by_id(identity_id)
        if identity is None:
            raise ProfileNotFoundError()
        return sanitize(identity)
