"""Integration tests for the UpdateProfileUseCase."""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from profiledir.core.schemas import IdentifierMode
from profiledir.core.security import CredentialHasher
from profiledir.features.profiles.dtos import (
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
)
from profiledir.features.profiles.models import Identity
from profiledir.features.profiles.repositories import SqlAlchemyIdentityStore
from profiledir.features.profiles.usecases import (
    AuthenticateUseCaseImpl,
    RegisterUseCaseImpl,
)
from profiledir.features.profiles.usecases.update_profile_usecase import (
    DuplicateKeyError,
    ProfileNotFoundError,
    UpdateProfileUseCaseImpl,
)


class CountingHasher:
    """Wraps a hasher and counts hash calls."""

    def __init__(self, hasher: CredentialHasher):
        self.hasher = hasher
        self.calls = 0

    def hash(self, secret: str) -> str:
        self.calls += 1
        return self.hasher.hash(secret)


@pytest.fixture
def counting_hasher(credential_hasher: CredentialHasher) -> CountingHasher:
    return CountingHasher(credential_hasher)


@pytest.fixture
def use_case(
    counting_hasher: CountingHasher, identity_store: SqlAlchemyIdentityStore
) -> UpdateProfileUseCaseImpl:
    return UpdateProfileUseCaseImpl(
        credential_hasher=counting_hasher, identity_store=identity_store
    )


async def _register(
    hasher: CredentialHasher,
    store: SqlAlchemyIdentityStore,
    name: str,
    mode: IdentifierMode,
    identifier: str,
    **extra: str,
) -> ProfileResponse:
    register = RegisterUseCaseImpl(credential_hasher=hasher, identity_store=store)
    return await register.execute(
        RegisterRequest(
            display_name=name,
            secret="pw1",
            identifier_mode=mode,
            identifier=identifier,
            **extra,
        )
    )


@pytest_asyncio.fixture
async def alice(
    credential_hasher: CredentialHasher, identity_store: SqlAlchemyIdentityStore
) -> ProfileResponse:
    return await _register(
        credential_hasher,
        identity_store,
        "Alice",
        IdentifierMode.EMAIL,
        "a@x.com",
        about="Hello",
    )


@pytest.mark.asyncio
class TestUpdateProfileUseCase:
    """Test suite for the UpdateProfileUseCase."""

    async def test_empty_field_keeps_value_and_non_empty_replaces(
        self, use_case: UpdateProfileUseCaseImpl, alice: ProfileResponse
    ):
        """An empty display name is ignored while location is applied."""
        response = await use_case.execute(
            alice.id, UpdateProfileRequest(display_name="", location="NYC")
        )

        assert response.display_name == "Alice"
        assert response.location == "NYC"
        assert response.about == "Hello"
        assert response.email == "a@x.com"

    async def test_whitespace_and_omitted_fields_are_ignored(
        self, use_case: UpdateProfileUseCaseImpl, alice: ProfileResponse
    ):
        """Whitespace-only values count as not provided."""
        response = await use_case.execute(
            alice.id, UpdateProfileRequest(about="   ", email="  ")
        )

        assert response.about == "Hello"
        assert response.email == "a@x.com"

    async def test_adds_phone_and_trims_keys(
        self, use_case: UpdateProfileUseCaseImpl, alice: ProfileResponse
    ):
        """A phone number can be added to an email-registered identity."""
        response = await use_case.execute(
            alice.id,
            UpdateProfileRequest(phone=" 555 ", display_name=" Alice B ", about=" x "),
        )

        assert response.phone == "555"
        assert response.display_name == "Alice B"
        assert response.about == " x "
        assert response.email == "a@x.com"

    async def test_secret_change_rehashes(
        self,
        use_case: UpdateProfileUseCaseImpl,
        alice: ProfileResponse,
        counting_hasher: CountingHasher,
        credential_hasher: CredentialHasher,
        identity_store: SqlAlchemyIdentityStore,
        db_session: AsyncSession,
    ):
        """A new secret replaces the hash; the old secret stops working."""
        response = await use_case.execute(alice.id, UpdateProfileRequest(secret="pw2"))

        assert counting_hasher.calls == 1
        assert "secret_hash" not in response.model_dump()

        identity = (
            await db_session.execute(select(Identity).filter_by(id=alice.id))
        ).scalar_one()
        assert identity.secret_hash != "pw2"

        authenticate = AuthenticateUseCaseImpl(
            credential_verifier=credential_hasher, identity_store=identity_store
        )
        assert (await authenticate.execute(IdentifierMode.EMAIL, "a@x.com", "pw2")).id == alice.id

    async def test_empty_secret_is_not_rehashed(
        self,
        use_case: UpdateProfileUseCaseImpl,
        alice: ProfileResponse,
        counting_hasher: CountingHasher,
    ):
        """An empty secret leaves the stored hash alone."""
        await use_case.execute(alice.id, UpdateProfileRequest(secret=""))

        assert counting_hasher.calls == 0

    async def test_email_collision(
        self,
        use_case: UpdateProfileUseCaseImpl,
        alice: ProfileResponse,
        credential_hasher: CredentialHasher,
        identity_store: SqlAlchemyIdentityStore,
    ):
        """Taking another identity's email fails and changes nothing."""
        bob = await _register(
            credential_hasher, identity_store, "Bob", IdentifierMode.PHONE, "555"
        )

        with pytest.raises(DuplicateKeyError) as exc_info:
            await use_case.execute(
                bob.id, UpdateProfileRequest(email="a@x.com", location="LA")
            )

        assert exc_info.value.field == "email"
        reloaded = await identity_store.find_by_id(bob.id)
        assert reloaded.email is None
        assert reloaded.location is None

    async def test_phone_collision(
        self,
        use_case: UpdateProfileUseCaseImpl,
        alice: ProfileResponse,
        credential_hasher: CredentialHasher,
        identity_store: SqlAlchemyIdentityStore,
    ):
        """Taking another identity's phone fails with the phone field named."""
        await _register(
            credential_hasher, identity_store, "Bob", IdentifierMode.PHONE, "555"
        )

        with pytest.raises(DuplicateKeyError) as exc_info:
            await use_case.execute(alice.id, UpdateProfileRequest(phone="555"))

        assert exc_info.value.field == "phone"

    async def test_reapplying_own_email_is_idempotent(
        self, use_case: UpdateProfileUseCaseImpl, alice: ProfileResponse
    ):
        """Setting an identity's own email again is not a collision."""
        first = await use_case.execute(alice.id, UpdateProfileRequest(email="a@x.com"))
        second = await use_case.execute(alice.id, UpdateProfileRequest(email="a@x.com"))

        assert first.email == second.email == "a@x.com"

    async def test_unknown_id(self, use_case: UpdateProfileUseCaseImpl):
        """Updating an unknown id fails with ProfileNotFoundError."""
        with pytest.raises(ProfileNotFoundError):
            await use_case.execute(uuid4(), UpdateProfileRequest(location="NYC"))

    async def test_unknown_id_with_nothing_to_apply(
        self, use_case: UpdateProfileUseCaseImpl
    ):
        """An empty update still reports a missing identity."""
        with pytest.raises(ProfileNotFoundError):
            await use_case.execute(uuid4(), UpdateProfileRequest())

    async def test_nothing_to_apply_returns_current_record(
        self, use_case: UpdateProfileUseCaseImpl, alice: ProfileResponse
    ):
        """An update with only blank fields returns the record unchanged."""
        response = await use_case.execute(
            alice.id, UpdateProfileRequest(display_name="", location="")
        )

        assert response.display_name == "Alice"
        assert response.location is None
