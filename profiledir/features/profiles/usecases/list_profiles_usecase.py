"""Use case for listing the profile directory."""

from profiledir.features.profiles.dtos import ListProfilesRequest, ProfileResponse
from profiledir.features.profiles.repositories.protocols import IdentityStore
from profiledir.features.profiles.sanitizer import sanitize_all


class ListProfilesUseCaseImpl:
    """Implementation of the list profiles use case."""

    def __init__(self, identity_store: IdentityStore):
        """Initialize the use case with dependencies.

        Args:
            identity_store: Store holding the identities
        """
        self.identity_store = identity_store

    async def execute(self, request: ListProfilesRequest) -> list[ProfileResponse]:
        """List sanitized profiles, newest first."""
        identities = await self.identity_store.list_all(
            limit=request.limit, offset=request.offset
        )
        return sanitize_all(identities)
