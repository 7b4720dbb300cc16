"""Login route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from profiledir.core.schemas import IdentifierMode
from profiledir.features.profiles.dependencies import get_authenticate_use_case
from profiledir.features.profiles.dtos import LoginRequest, ProfileResponse
from profiledir.features.profiles.usecases.authenticate_usecase import (
    InvalidCredentialsError,
    InvalidInputError,
    StoreUnavailableError,
)


class AuthenticateUseCase(Protocol):
    """Protocol for the authenticate use case."""

    async def execute(
        self, identifier_mode: IdentifierMode, identifier: str, secret: str
    ) -> ProfileResponse:
        """Check a secret and return the profile."""
        ...


router = APIRouter()


@router.post("/login", response_model=ProfileResponse)
async def login(
    login_data: LoginRequest,
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
) -> ProfileResponse:
    """Authenticate with email or phone and return the profile.

    No token or cookie is issued.
    """
    try:
        return await use_case.execute(
            login_data.identifier_mode, login_data.identifier, login_data.secret
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(e)},
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": str(e)},
        )
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Server error"},
        )
