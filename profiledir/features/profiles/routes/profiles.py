"""Profile directory route handlers."""

from typing import Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from profiledir.features.profiles.dependencies import (
    get_get_profile_use_case,
    get_list_profiles_use_case,
    get_update_profile_use_case,
)
from profiledir.features.profiles.dtos import (
    ListProfilesRequest,
    ProfileResponse,
    UpdateProfileRequest,
)
from profiledir.features.profiles.usecases.update_profile_usecase import (
    DuplicateKeyError,
    ProfileNotFoundError,
    StoreUnavailableError,
)


class ListProfilesUseCase(Protocol):
    """Protocol for the list profiles use case."""

    async def execute(self, request: ListProfilesRequest) -> list[ProfileResponse]:
        """List profiles newest first."""
        ...


class GetProfileUseCase(Protocol):
    """Protocol for the get profile use case."""

    async def execute(self, identity_id: UUID) -> ProfileResponse:
        """Get a single profile by ID."""
        ...


class UpdateProfileUseCase(Protocol):
    """Protocol for the update profile use case."""

    async def execute(
        self, identity_id: UUID, request: UpdateProfileRequest
    ) -> ProfileResponse:
        """Partially update a profile."""
        ...


router = APIRouter()


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": "Server error"},
    )


@router.get("/profiles", response_model=list[ProfileResponse])
async def list_profiles(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    use_case: ListProfilesUseCase = Depends(get_list_profiles_use_case),
) -> list[ProfileResponse]:
    """List the directory, newest profiles first."""
    try:
        return await use_case.execute(ListProfilesRequest(limit=limit, offset=offset))
    except StoreUnavailableError:
        raise _server_error()


@router.get("/profiles/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: UUID,
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
) -> ProfileResponse:
    """Get a single profile by ID."""
    try:
        return await use_case.execute(profile_id)
    except ProfileNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": str(e)},
        )
    except StoreUnavailableError:
        raise _server_error()


@router.put("/profiles/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: UUID,
    request: UpdateProfileRequest,
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
) -> ProfileResponse:
    """Update a profile's information.

    Only fields with a non-blank value are applied; empty strings leave
    the stored value unchanged. Fields that can be updated:
    - display_name, email, phone
    - about, location, avatar_ref
    - secret (re-hashed)
    """
    try:
        return await use_case.execute(profile_id, request)
    except ProfileNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": str(e)},
        )
    except DuplicateKeyError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": f"{e.field.capitalize()} already registered",
                "fields": list(e.fields),
            },
        )
    except StoreUnavailableError:
        raise _server_error()
