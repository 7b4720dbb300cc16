"""Tests for application settings."""

from profiledir.core.settings import Settings


def test_database_url_from_components():
    settings = Settings(
        postgres_user="u",
        postgres_password="p",
        postgres_host="db",
        postgres_port=6543,
        postgres_db="main",
    )

    assert settings.database_url == "postgresql+asyncpg://u:p@db:6543/main"


def test_database_url_uses_test_database_when_testing():
    settings = Settings(testing=True, test_postgres_db="scratch")

    assert settings.database_url.endswith("/scratch")


def test_database_url_override_wins():
    settings = Settings(database_url_override="sqlite+aiosqlite:///./profiles.db")

    assert settings.database_url == "sqlite+aiosqlite:///./profiles.db"
