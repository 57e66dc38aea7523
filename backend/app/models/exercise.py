"""Exercise ORM — one logged activity.

Invariants:
    - user_id references an existing User at creation time (checked by the handler)
    - duration >= 1 minute, description <= 20 chars (checked by core/validation_rules.py)
    - date is stored in UTC

Design Decisions:
    - No ForeignKey on user_id: referential integrity is a handler check, not a DB constraint
    - Composite index (user_id, date): the log query filters by user and date range
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import DESCRIPTION_MAX_LENGTH
from app.db.base import Base


class Exercise(Base):
    """Exercise entry — description, duration in minutes, and date."""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id_date", "user_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=False,
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
