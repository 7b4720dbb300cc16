"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profile Directory API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=5000, description="Port to bind to")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    # PostgreSQL Database
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="profiledir", description="PostgreSQL database name")
    test_postgres_db: str = Field(
        default="profiledir_test", description="PostgreSQL test database name"
    )
    database_url_override: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL, e.g. sqlite+aiosqlite:///./profiles.db",
    )
    create_tables_on_startup: bool = Field(
        default=True, description="Create missing tables when the app starts"
    )

    # Database URL (computed property)
    @property
    def database_url(self) -> str:
        """Construct database URL from individual components."""
        if self.database_url_override:
            return self.database_url_override
        db_name = self.test_postgres_db if self.testing else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{db_name}"
        )

    # Identity store
    store_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Upper bound for a single store call"
    )

    # Credential hashing (argon2id, roughly the cost of bcrypt with 10 rounds)
    hash_scheme: str = Field(default="argon2", description="passlib hash scheme")
    hash_time_cost: int = Field(default=3, ge=1, description="argon2 time cost")
    hash_memory_cost: int = Field(
        default=65536, ge=8, description="argon2 memory cost in KiB"
    )
    hash_parallelism: int = Field(default=4, ge=1, description="argon2 lanes")

    # Media (avatar uploads)
    media_root: str = Field(default="./media", description="Directory for uploads")
    media_base_url: str = Field(
        default="http://localhost:5000/media", description="Public URL prefix for uploads"
    )
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024, gt=0, description="Largest accepted upload"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
