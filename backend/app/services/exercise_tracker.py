"""Exercise Tracker Handlers — create_user, add_activity, activity_log, list_users.

Invariants:
    - Each handler does at most two sequential DB operations (lookup, then read/write)
    - Handlers never recover from failures: every error is raised as a TrackerError variant
    - Field constraints checked by core/validation_rules.py before any write
    - Username uniqueness enforced by the DB unique index (IntegrityError → DuplicateKeyError)
    - Unknown or malformed userId → NotFoundError.unknown_user (400)

Design Decisions:
    - Session injected by the caller (Depends(get_db) in routes, fixtures in tests)
    - No pre-insert uniqueness SELECT: racy, the unique index is authoritative
    - add_activity responds with the user's identity plus the stored exercise fields
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dates import date_or_now, human_date, log_range
from app.core.domain_types import parse_user_id
from app.core.errors import DuplicateKeyError, NotFoundError
from app.core.validation_rules import (
    USER_RULES, unique_fields, validate_exercise, validate_user,
)
from app.models.exercise import Exercise
from app.models.user import User
from app.schemas.exercise import (
    ActivityAdded, ActivityLog, LogEntry, LogQuery, UserCreated,
)

logger = logging.getLogger(__name__)


class ExerciseTracker:
    """Request handlers for the exercise tracker endpoints."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, fields: dict) -> UserCreated:
        """Persist a new user with a unique username."""
        values = validate_user(fields)
        user = User(username=values["username"])
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateKeyError(unique_fields(USER_RULES)[0])
        await self.db.refresh(user)
        logger.info("User created", extra={"user_id": str(user.id)})
        return UserCreated(username=user.username, id=str(user.id))

    async def add_activity(self, fields: dict) -> ActivityAdded:
        """Log an exercise against an existing user."""
        user = await self.get_user_or_raise(fields.get("userId"))
        values = validate_exercise({**fields, "userId": str(user.id)})
        exercise = Exercise(
            user_id=user.id,
            description=values["description"],
            duration=values["duration"],
            date=date_or_now(fields.get("date")),
        )
        self.db.add(exercise)
        await self.db.commit()
        await self.db.refresh(exercise)
        logger.info("Exercise added", extra={"user_id": str(user.id)})
        return ActivityAdded(
            id=str(user.id),
            username=user.username,
            date=human_date(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )

    async def activity_log(self, query: LogQuery) -> ActivityLog:
        """A user's exercises within [from, to], newest first, capped at limit."""
        user = await self.get_user_or_raise(query.user_id)
        start, end = log_range(query.start, query.end)
        stmt = (
            select(Exercise)
            .where(Exercise.user_id == user.id)
            .where(Exercise.date >= start)
            .where(Exercise.date <= end)
            .order_by(Exercise.date.desc())
        )
        if query.limit:
            stmt = stmt.limit(query.limit)
        result = await self.db.execute(stmt)
        exercises = result.scalars().all()
        return ActivityLog(
            id=str(user.id),
            username=user.username,
            log=[
                LogEntry(
                    description=e.description,
                    duration=e.duration,
                    date=human_date(e.date),
                )
                for e in exercises
            ],
        )

    async def list_users(self) -> list[dict]:
        """Every user record, unprojected."""
        result = await self.db.execute(select(User))
        return [u.to_document() for u in result.scalars().all()]

    async def get_user_or_raise(self, user_id: object) -> User:
        """Resolve a userId from the request; malformed ids count as unknown."""
        uid = parse_user_id(user_id)
        user = await self.db.get(User, uid) if uid else None
        if user is None:
            raise NotFoundError.unknown_user(
                user_id if isinstance(user_id, str) else None,
            )
        return user
