"""Credential hashing utilities."""

from functools import lru_cache

from passlib.context import CryptContext

from profiledir.core.settings import Settings, get_settings


class CredentialHasher:
    """One-way hashing and verification of user secrets.

    Every call to `hash` generates a fresh salt that is embedded in the
    returned digest, so two hashes of the same secret never match textually.
    """

    def __init__(
        self,
        scheme: str = "argon2",
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        settings = {}
        if scheme == "argon2":
            settings = {
                "argon2__time_cost": time_cost,
                "argon2__memory_cost": memory_cost,
                "argon2__parallelism": parallelism,
            }
        self.context = CryptContext(schemes=[scheme], deprecated="auto", **settings)

    def hash(self, secret: str) -> str:
        """Hash a secret."""
        return self.context.hash(secret)

    def verify(self, secret: str, digest: str | None) -> bool:
        """Verify a secret against its digest.

        Returns False for a missing or malformed digest instead of raising.
        """
        if not digest:
            self.dummy_verify()
            return False
        try:
            return self.context.verify(secret, digest)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification without a digest."""
        self.context.dummy_verify()


def build_credential_hasher(settings: Settings) -> CredentialHasher:
    """Create a hasher configured from settings."""
    return CredentialHasher(
        scheme=settings.hash_scheme,
        time_cost=settings.hash_time_cost,
        memory_cost=settings.hash_memory_cost,
        parallelism=settings.hash_parallelism,
    )


@lru_cache
def get_credential_hasher() -> CredentialHasher:
    """Get the application-wide credential hasher."""
    return build_credential_hasher(get_settings())
