"""Signup route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from profiledir.features.profiles.dependencies import get_register_use_case
from profiledir.features.profiles.dtos import ProfileResponse, RegisterRequest
from profiledir.features.profiles.usecases.register_usecase import (
    DuplicateKeyError,
    InvalidInputError,
    StoreUnavailableError,
)


class RegisterUseCase(Protocol):
    """Protocol for the register use case."""

    async def execute(self, request: RegisterRequest) -> ProfileResponse:
        """Create a new identity."""
        ...


router = APIRouter()


@router.post(
    "/signup", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: RegisterRequest,
    use_case: RegisterUseCase = Depends(get_register_use_case),
) -> ProfileResponse:
    """Register a new profile bound to an email or a phone number.

    `identifier_mode` says which of the two `identifier` is; only that key
    is stored on the new profile.
    """
    try:
        return await use_case.execute(request)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(e), "field": e.field},
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
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Server error"},
        )
