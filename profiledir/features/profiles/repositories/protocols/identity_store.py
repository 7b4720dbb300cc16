"""Protocol definition and types for identity store operations."""

from typing import Any, Protocol, TypedDict
from uuid import UUID

from profiledir.features.profiles.models import Identity


class NewIdentity(TypedDict, total=False):
    """Fields of an identity that is about to be inserted."""

    display_name: str
    secret_hash: str
    email: str
    phone: str
    about: str
    location: str
    avatar_ref: str


class IdentityStore(Protocol):
    """Persistence of identities with two independent unique keys."""

    async def find_by_email(self, email: str) -> Identity | None:
        """Find the identity holding this email, if any."""
        ...

    async def find_by_phone(self, phone: str) -> Identity | None:
        """Find the identity holding this phone number, if any."""
        ...

    async def find_by_id(self, identity_id: UUID) -> Identity | None:
        """Find an identity by its id."""
        ...

    async def list_all(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Identity]:
        """List identities, newest first."""
        ...

    async def insert(self, record: NewIdentity) -> Identity:
        """Insert a new identity.

        Raises:
            DuplicateKeyError: If email or phone is already held by another identity
            StoreUnavailableError: If the database fails or times out
        """
        ...

    async def update_by_id(
        self, identity_id: UUID, fields: dict[str, Any]
    ) -> Identity | None:
        """Apply fields to an identity, returning None when it does not exist.

        Raises:
            DuplicateKeyError: If email or phone is already held by another identity
            StoreUnavailableError: If the database fails or times out
        """
        ...
