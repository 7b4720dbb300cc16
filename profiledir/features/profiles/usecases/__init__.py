"""Profile use cases."""

from .authenticate_usecase import AuthenticateUseCaseImpl
from .get_profile_usecase import GetProfileUseCaseImpl
from .list_profiles_usecase import ListProfilesUseCaseImpl
from .register_usecase import RegisterUseCaseImpl
from .update_profile_usecase import UpdateProfileUseCaseImpl

__all__ = [
    "RegisterUseCaseImpl",
    "AuthenticateUseCaseImpl",
    "UpdateProfileUseCaseImpl",
    "ListProfilesUseCaseImpl",
    "GetProfileUseCaseImpl",
]
