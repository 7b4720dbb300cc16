"""SQLAlchemy implementation of the IdentityStore protocol.

Uniqueness of email and phone is enforced by the database's unique
constraints. A conflicting write fails inside its own transaction and is
translated into a DuplicateKeyError; nothing is checked up front, so two
concurrent writers can never both succeed.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing_extensions import override

from profiledir.features.profiles.models import Identity
from profiledir.features.profiles.repositories.errors import (
    DuplicateKeyError,
    StoreUnavailableError,
)
from profiledir.features.profiles.repositories.protocols import (
    IdentityStore,
    NewIdentity,
)

logger = logging.getLogger(__name__)

UNIQUE_FIELDS = ("email", "phone")

# How each engine names the violated constraint in its error message
_UNIQUE_MARKERS = {
    "email": ("uq_identities_email", "identities.email"),
    "phone": ("uq_identities_phone", "identities.phone"),
}

MUTABLE_FIELDS = frozenset(
    {"display_name", "email", "phone", "secret_hash", "about", "location", "avatar_ref"}
)


def _violation_summary(error: IntegrityError) -> str:
    """Constraint name and headline of a driver error, lower-cased.

    Detail lines (PostgreSQL's "Key (email)=(...)") quote the written
    values and are left out.
    """
    orig = error.orig
    constraint = getattr(orig, "constraint_name", None) or getattr(
        orig.__cause__, "constraint_name", None
    )
    lines = str(orig).splitlines()
    headline = lines[0] if lines else ""
    return f"{constraint or ''} {headline}".lower()


def collided_fields(error: IntegrityError, written: dict[str, Any]) -> tuple[str, ...]:
    """Work out which unique fields an IntegrityError refers to.

    Args:
        error: The error raised by the database driver
        written: The field values of the failed write

    Returns:
        The colliding field names; empty when the error is not a uniqueness
        violation on email or phone.
    """
    message = _violation_summary(error)
    fields = tuple(
        field
        for field, markers in _UNIQUE_MARKERS.items()
        if any(marker in message for marker in markers)
    )
    if fields:
        return fields

    if "unique" in message or "duplicate" in message:
        # Unrecognised constraint name; blame the unique fields being written
        return tuple(field for field in UNIQUE_FIELDS if written.get(field))

    return ()


class SqlAlchemyIdentityStore(IdentityStore):
    """Identity store backed by an SQLAlchemy async session."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        timeout_seconds: float = 5.0,
    ):
        """Initialize the store.

        Args:
            get_db_session: Function returning a database session context manager
            timeout_seconds: Upper bound for each store call
        """
        self.get_db_session = get_db_session
        self.timeout_seconds = timeout_seconds

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bounded by the store timeout.

        Driver and timeout failures are surfaced as StoreUnavailableError.
        """
        try:
            async with asyncio.timeout(self.timeout_seconds):
                async with self.get_db_session() as session:
                    yield session
        except (DuplicateKeyError, StoreUnavailableError):
            raise
        except TimeoutError as e:
            logger.error("Identity store call timed out after %ss", self.timeout_seconds)
            raise StoreUnavailableError("Identity store timed out") from e
        except SQLAlchemyError as e:
            # The driver message may echo bound parameters; log the type only
            logger.error("Identity store call failed: %s", type(e).__name__)
            raise StoreUnavailableError() from e

    async def _find_one(self, **criteria: Any) -> Identity | None:
        async with self._session() as session:
            result = await session.execute(select(Identity).filter_by(**criteria))
            return result.scalar_one_or_none()

    @override
    async def find_by_email(self, email: str) -> Identity | None:
        return await self._find_one(email=email)

    @override
    async def find_by_phone(self, phone: str) -> Identity | None:
        return await self._find_one(phone=phone)

    @override
    async def find_by_id(self, identity_id: UUID) -> Identity | None:
        return await self._find_one(id=identity_id)

    @override
    async def list_all(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Identity]:
        """List identities ordered by creation time, newest first.

        Rows with equal timestamps come back in no guaranteed order.
        """
        async with self._session() as session:
            query = (
                select(Identity)
                .order_by(Identity.created_at.desc())
                .offset(offset)
            )
            if limit is not None:
                query = query.limit(limit)
            result = await session.execute(query)
            return list(result.scalars().all())

    @override
    async def insert(self, record: NewIdentity) -> Identity:
        """Insert a new identity in a single transaction."""
        async with self._session() as session:
            try:
                async with session.begin():
                    identity = Identity(**record)
                    session.add(identity)
                    await session.flush()
            except IntegrityError as e:
                fields = collided_fields(e, dict(record))
                if not fields:
                    raise
                logger.info("Rejected insert on duplicate %s", ", ".join(fields))
                raise DuplicateKeyError(fields) from e

            return identity

    @override
    async def update_by_id(
        self, identity_id: UUID, fields: dict[str, Any]
    ) -> Identity | None:
        """Apply fields to an identity in a single transaction."""
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        async with self._session() as session:
            try:
                async with session.begin():
                    identity = await session.get(Identity, identity_id)
                    if identity is None:
                        return None

                    for name, value in fields.items():
                        setattr(identity, name, value)

                    await session.flush()
            except IntegrityError as e:
                collided = collided_fields(e, fields)
                if not collided:
                    raise
                logger.info(
                    "Rejected update of identity %s on duplicate %s",
                    identity_id,
                    ", ".join(collided),
                )
                raise DuplicateKeyError(collided) from e

            return identity
