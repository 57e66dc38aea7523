"""Exercise Tracker Routes — new user, add activity, activity log, list users.

Invariants:
    - POST bodies accepted as JSON or form-urlencoded (request_body.body_fields)
    - Success responses are JSON; failures raise TrackerError for the global handler
    - Routes hold no business logic: one ExerciseTracker call each

Design Decisions:
    - Query params declared as plain strings: lenient parsing (dates, limit) is part of
      the contract, so FastAPI's strict coercion would reject inputs clients rely on
    - GET /users returns a bare JSON array of raw records (existing contract)
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.request_body import body_fields
from app.infrastructure.database import get_db
from app.schemas.exercise import (
    ActivityAdded, ActivityLog, LogQuery, UserCreated,
)
from app.services.exercise_tracker import ExerciseTracker

router = APIRouter(prefix="/api/exercise", tags=["exercise"])


@router.post("/new-user", response_model=UserCreated)
async def create_user(
    fields: dict[str, Any] = Depends(body_fields),
    db: AsyncSession = Depends(get_db),
):
    """Create a user from `username`."""
    return await ExerciseTracker(db).create_user(fields)


@router.post("/add", response_model=ActivityAdded)
async def add_activity(
    fields: dict[str, Any] = Depends(body_fields),
    db: AsyncSession = Depends(get_db),
):
    """Log an exercise for `userId`; empty or invalid `date` means now."""
    return await ExerciseTracker(db).add_activity(fields)


@router.get("/log", response_model=ActivityLog)
async def activity_log(
    user_id: str | None = Query(None, alias="userId"),
    start: str | None = Query(None, alias="from"),
    end: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """A user's exercises, newest first, optionally bounded by date and count."""
    query = LogQuery(user_id=user_id, start=start, end=end, limit=limit)
    return await ExerciseTracker(db).activity_log(query)


@router.get("/users")
async def list_users(db: AsyncSession = Depends(get_db)):
    """All users as stored."""
    return await ExerciseTracker(db).list_users()
