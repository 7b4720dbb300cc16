"""Database models for the profile directory."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profiledir.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Identity(Base):
    """A directory profile reachable by email and/or phone."""

    __tablename__ = "identities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # NULLs never collide, so both keys are optional yet unique when present
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    secret_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_ref: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_identities_email"),
        UniqueConstraint("phone", name="uq_identities_phone"),
        Index("ix_identities_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"Identity(id={self.id!s}, display_name={self.display_name!r})"
