"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- A throwaway SQLite database (aiosqlite) with the application schema
- SQLAlchemy engine, session and identity store
- A cheap credential hasher
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from profiledir.core.security import CredentialHasher
from profiledir.features.profiles.repositories import SqlAlchemyIdentityStore
from tests.utils.database import (
    create_all_tables,
    create_session_factory,
    drop_all_tables,
)


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Provide SQLAlchemy async engine for tests.

    Each test gets its own database file, so no cleanup between tests is needed.
    A file (not :memory:) is used so concurrent sessions see the same data.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'profiles.db'}")
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def get_db_session(
    async_engine: AsyncEngine,
) -> Callable[[], AbstractAsyncContextManager[AsyncSession]]:
    """Provide a session factory shaped like `profiledir.db.session.get_db_session`."""
    return create_session_factory(async_engine)


@pytest_asyncio.fixture
async def db_session(
    get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for arranging and inspecting test data."""
    async with get_db_session() as session:
        yield session


@pytest.fixture
def identity_store(
    get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
) -> SqlAlchemyIdentityStore:
    """Provide an identity store on the test database."""
    return SqlAlchemyIdentityStore(get_db_session=get_db_session, timeout_seconds=30)


@pytest.fixture
def credential_hasher() -> CredentialHasher:
    """Provide a credential hasher with minimal cost for fast tests."""
    return CredentialHasher(time_cost=1, memory_cost=1024, parallelism=1)
