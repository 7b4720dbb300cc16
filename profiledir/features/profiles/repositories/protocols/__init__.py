"""Protocols for profile repositories."""

from .identity_store import IdentityStore, NewIdentity

__all__ = ["IdentityStore", "NewIdentity"]
