"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the UUID of a stored User; request input becomes a UserId
      only through parse_user_id
    - Field bounds live here once; rules, ORM columns and migrations read them
    - All rule kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


def parse_user_id(value: object) -> UserId | None:
    """Request userId → UserId; None when absent or not a UUID."""
    if not value:
        return None
    try:
        return UserId(UUID(str(value)))
    except ValueError:
        return None


# ─── Field Bounds ────────────────────────────────────────────────

USERNAME_MAX_LENGTH = 25
DESCRIPTION_MAX_LENGTH = 20
DURATION_MIN_MINUTES = 1


# ─── Enums ───────────────────────────────────────────────────────

class RuleKind(str, Enum):
    """Kinds of per-field constraints checked before a write."""
    REQUIRED = "required"
    CAST = "cast"
    MAX_LENGTH = "maxlength"
    MIN = "min"
    UNIQUE = "unique"
