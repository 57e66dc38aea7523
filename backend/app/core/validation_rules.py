"""Validation Rules — declarative per-field constraints for User and Exercise records.

Invariants:
    - Rules are evaluated in declaration order; fields keep schema order
    - A field stops at its first failing rule (one message per field)
    - The first failing field's message is the one clients see
    - UNIQUE is declarative only: the store's unique index enforces it on write
    - Pure functions — no IO, no DB, testable without a live database

Design Decisions:
    - Constraints live beside the domain, not inside ORM column definitions
      (ADR: storage engine swappable, rules unit-testable)
    - REQUIRED runs before CAST so an empty number field reports "required",
      the same as a document store that casts "" to null
    - Messages are part of the public contract: clients match on the exact text
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from app.core.domain_types import (
    RuleKind,
    USERNAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    DURATION_MIN_MINUTES,
)
from app.core.errors import ValidationError


@dataclass(frozen=True)
class FieldRule:
    """A single constraint on one field."""
    field: str
    kind: RuleKind
    message: str = ""
    limit: int | None = None
    cast: type | None = None


def _required(path: str) -> FieldRule:
    return FieldRule(path, RuleKind.REQUIRED, f"Path `{path}` is required.")


def _cast(path: str, target: type) -> FieldRule:
    type_name = "Number" if target is int else "string"
    return FieldRule(
        path, RuleKind.CAST,
        f'Cast to {type_name} failed for value "{{value}}" at path "{path}"',
        cast=target,
    )


USER_RULES: tuple[FieldRule, ...] = (
    _required("username"),
    _cast("username", str),
    FieldRule(
        "username", RuleKind.MAX_LENGTH, "Username too long",
        limit=USERNAME_MAX_LENGTH,
    ),
    FieldRule("username", RuleKind.UNIQUE),
)

EXERCISE_RULES: tuple[FieldRule, ...] = (
    _required("userId"),
    _cast("userId", str),
    _required("description"),
    _cast("description", str),
    FieldRule(
        "description", RuleKind.MAX_LENGTH, "Description too long",
        limit=DESCRIPTION_MAX_LENGTH,
    ),
    _required("duration"),
    _cast("duration", int),
    FieldRule(
        "duration", RuleKind.MIN, "Duration too short",
        limit=DURATION_MIN_MINUTES,
    ),
)


def evaluate(
    record: Mapping[str, Any], rules: Sequence[FieldRule],
) -> tuple[dict[str, Any], dict[str, str]]:
    """Apply rules to a raw record.

    Returns (coerced values, ordered field → first failure message).
    Fields without rules are ignored and do not appear in the values.
    """
    values: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for rule in rules:
        if rule.field in errors:
            continue
        value = values.get(rule.field, record.get(rule.field))
        ok, value = _apply(rule, value)
        if ok:
            values[rule.field] = value
        else:
            values.pop(rule.field, None)
            errors[rule.field] = rule.message.format(value=value)
    return values, errors


def validate_user(record: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a new-user record; raises ValidationError on the first failure."""
    return _validate(record, USER_RULES)


def validate_exercise(record: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a new-exercise record; raises ValidationError on the first failure."""
    return _validate(record, EXERCISE_RULES)


def unique_fields(rules: Sequence[FieldRule]) -> list[str]:
    """Fields the store must keep unique, in declaration order."""
    return [r.field for r in rules if r.kind == RuleKind.UNIQUE]


def _validate(
    record: Mapping[str, Any], rules: Sequence[FieldRule],
) -> dict[str, Any]:
    values, errors = evaluate(record, rules)
    if errors:
        raise ValidationError.from_field_errors(errors)
    return values


def _apply(rule: FieldRule, value: Any) -> tuple[bool, Any]:
    if rule.kind == RuleKind.REQUIRED:
        return not _is_missing(value), value
    if value is None:
        return True, value
    if rule.kind == RuleKind.CAST:
        return _cast_value(value, rule.cast)
    if rule.kind == RuleKind.MAX_LENGTH:
        return len(value) <= rule.limit, value
    if rule.kind == RuleKind.MIN:
        return value >= rule.limit, value
    # UNIQUE is checked by the store
    return True, value


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _cast_value(value: Any, target: type | None) -> tuple[bool, Any]:
    if target is str:
        if isinstance(value, str):
            return True, value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return True, str(value)
        return False, value
    if target is int:
        return _to_int(value)
    return True, value


def _to_int(value: Any) -> tuple[bool, Any]:
    if isinstance(value, bool):
        return False, value
    if isinstance(value, int):
        return True, value
    if isinstance(value, float):
        return (True, int(value)) if value.is_integer() else (False, value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return True, int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return False, value
        if number.is_integer():
            return True, int(number)
    return False, value
