"""User ORM — a person who logs exercises.

Invariants:
    - id is UUID primary key (generated on insert)
    - username is unique across all users (DB unique index)
    - Users are never updated or deleted by the API

Design Decisions:
    - Uniqueness left to the database: the unique index is the only race-free check
    - to_document() dumps every column: backs the raw list-users contract
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.core.dates import as_utc
from app.core.domain_types import USERNAME_MAX_LENGTH
from app.db.base import Base


class User(Base):
    """User record — owns a log of exercises (by reference, no FK)."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        """Full record, internal fields included."""
        return {
            "id": str(self.id),
            "username": self.username,
            "created_at": as_utc(self.created_at).isoformat(),
        }
