"""Exercise Tracker Schemas — success payloads and log query parameters.

Invariants:
    - Every success payload identifies the user by `id` and `username`
    - Dates on the wire are human-readable calendar dates ("Mon Jan 01 2024")
    - LogQuery.limit is None (unbounded) or a positive int no larger than MAX_LIMIT

Design Decisions:
    - Lenient limit parsing: non-numeric or 0 means "no limit", -n means n,
      matching the document-store limit semantics existing clients rely on
    - A limit too large for a signed 64-bit LIMIT caps nothing, so it is treated
      as "no limit" rather than sent to the driver
    - ActivityAdded echoes the user's id, not the new exercise id (existing contract)
"""

import math

from pydantic import BaseModel, field_validator

# Largest LIMIT the stores accept (signed 64-bit INTEGER)
MAX_LIMIT = 2**63 - 1


class UserCreated(BaseModel):
    """Response of POST /new-user."""
    username: str
    id: str


class ActivityAdded(BaseModel):
    """Response of POST /add."""
    id: str
    username: str
    date: str
    duration: int
    description: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ActivityLog(BaseModel):
    """Response of GET /log."""
    id: str
    username: str
    log: list[LogEntry]


class LogQuery(BaseModel):
    """Normalized GET /log query string."""
    user_id: str | None = None
    start: str | None = None
    end: str | None = None
    limit: int | None = None

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: object) -> int | None:
        if v is None or isinstance(v, bool):
            return None
        try:
            number = float(v)
        except (TypeError, ValueError):
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        limit = abs(int(number))
        if limit == 0 or limit > MAX_LIMIT:
            return None
        return limit
