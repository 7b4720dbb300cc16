"""FastAPI dependencies wiring the profile use cases to their collaborators."""

from fastapi import Depends

from profiledir.core.security import CredentialHasher, get_credential_hasher
from profiledir.core.settings import get_settings
from profiledir.db.session import get_db_session
from profiledir.features.profiles.repositories import (
    IdentityStore,
    SqlAlchemyIdentityStore,
)
from profiledir.features.profiles.services import ImageStore, LocalImageStore
from profiledir.features.profiles.usecases import (
    AuthenticateUseCaseImpl,
    GetProfileUseCaseImpl,
    ListProfilesUseCaseImpl,
    RegisterUseCaseImpl,
    UpdateProfileUseCaseImpl,
)


def get_identity_store() -> IdentityStore:
    """Dependency injection for the identity store."""
    return SqlAlchemyIdentityStore(
        get_db_session=get_db_session,
        timeout_seconds=get_settings().store_timeout_seconds,
    )


def get_hasher() -> CredentialHasher:
    """Dependency injection for the credential hasher."""
    return get_credential_hasher()


def get_image_store() -> ImageStore:
    """Dependency injection for the avatar image store."""
    settings = get_settings()
    return LocalImageStore(root=settings.media_root, base_url=settings.media_base_url)


async def get_register_use_case(
    hasher: CredentialHasher = Depends(get_hasher),
    identity_store: IdentityStore = Depends(get_identity_store),
) -> RegisterUseCaseImpl:
    """Dependency injection for the register use case."""
    return RegisterUseCaseImpl(credential_hasher=hasher, identity_store=identity_store)


async def get_authenticate_use_case(
    hasher: CredentialHasher = Depends(get_hasher),
    identity_store: IdentityStore = Depends(get_identity_store),
) -> AuthenticateUseCaseImpl:
    """Dependency injection for the authenticate use case."""
    return AuthenticateUseCaseImpl(
        credential_verifier=hasher, identity_store=identity_store
    )


async def get_update_profile_use_case(
    hasher: CredentialHasher = Depends(get_hasher),
    identity_store: IdentityStore = Depends(get_identity_store),
) -> UpdateProfileUseCaseImpl:
    """Dependency injection for the update profile use case."""
    return UpdateProfileUseCaseImpl(
        credential_hasher=hasher, identity_store=identity_store
    )


async def get_list_profiles_use_case(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> ListProfilesUseCaseImpl:
    """Dependency injection for the list profiles use case."""
    return ListProfilesUseCaseImpl(identity_store=identity_store)


async def get_get_profile_use_case(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> GetProfileUseCaseImpl:
    """Dependency injection for the get profile use case."""
    return GetProfileUseCaseImpl(identity_store=identity_store)
