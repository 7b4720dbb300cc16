"""Tests for security utilities."""

import pytest

from profiledir.core.security import CredentialHasher, build_credential_hasher
from profiledir.core.settings import Settings


def test_secret_hashing(credential_hasher: CredentialHasher):
    """Test secret hashing and verification."""
    secret = "testpassword123"
    hashed = credential_hasher.hash(secret)

    # Hash should be different from original secret
    assert hashed != secret

    # Should verify correctly
    assert credential_hasher.verify(secret, hashed) is True

    # Should not verify incorrect secret
    assert credential_hasher.verify("wrongpassword", hashed) is False


def test_each_hash_uses_a_fresh_salt(credential_hasher: CredentialHasher):
    """Hashing the same secret twice yields different digests that both verify."""
    first = credential_hasher.hash("pw1")
    second = credential_hasher.hash("pw1")

    assert first != second
    assert credential_hasher.verify("pw1", first) is True
    assert credential_hasher.verify("pw1", second) is True


@pytest.mark.parametrize(
    "digest",
    [
        None,
        "",
        "not-a-hash",
        "$argon2id$v=19$m=1024,t=1,p=1$garbage",
        "$2b$10$tooshort",
    ],
)
def test_verify_malformed_digest_returns_false(
    credential_hasher: CredentialHasher, digest: str | None
):
    """Malformed or missing digests never raise."""
    assert credential_hasher.verify("pw1", digest) is False


def test_dummy_verify_does_not_raise(credential_hasher: CredentialHasher):
    """dummy_verify burns time without needing a digest."""
    credential_hasher.dummy_verify()


def test_build_credential_hasher_uses_settings():
    """Work factor comes from settings and is embedded in the digest."""
    settings = Settings(hash_time_cost=2, hash_memory_cost=2048, hash_parallelism=1)
    hasher = build_credential_hasher(settings)

    digest = hasher.hash("pw1")

    assert digest.startswith("$argon2")
    assert "m=2048,t=2,p=1" in digest
    assert hasher.verify("pw1", digest) is True
