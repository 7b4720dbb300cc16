"""Outward representation of identities.

Every record leaving the service goes through `sanitize`. The response
model is an allow-list, so the secret hash cannot be serialised even if
new columns are added to the table.
"""

from profiledir.features.profiles.dtos import ProfileResponse
from profiledir.features.profiles.models import Identity


def sanitize(identity: Identity) -> ProfileResponse:
    """Build the public view of an identity."""
    return ProfileResponse.model_validate(identity)


def sanitize_all(identities: list[Identity]) -> list[ProfileResponse]:
    """Build public views for a list of identities."""
    return [sanitize(identity) for identity in identities]
