"""Repositories for the profile feature."""

from .errors import DuplicateKeyError, StoreUnavailableError
from .protocols import IdentityStore, NewIdentity
from .sqlalchemy_identity_store import SqlAlchemyIdentityStore

__all__ = [
    "IdentityStore",
    "NewIdentity",
    "SqlAlchemyIdentityStore",
    "DuplicateKeyError",
    "StoreUnavailableError",
]
