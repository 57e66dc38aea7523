"""Request Body — reads POST fields from JSON or form-urlencoded bodies.

Invariants:
    - Always returns a flat dict (field name → raw value)
    - Malformed JSON is a client error (400), never a 500
    - Unknown content types yield an empty dict (field rules report what is missing)

Design Decisions:
    - One dependency for both encodings: the HTML index posts forms, API clients post JSON
    - Raw values only: coercion and constraints belong to core/validation_rules.py
"""

from typing import Any

from fastapi import Request

from app.core.errors import ValidationError


async def body_fields(request: Request) -> dict[str, Any]:
    """FastAPI dependency: the request body as a field mapping."""
    content_type = request.headers.get("content-type", "").lower()
    if "application/json" in content_type:
        if not await request.body():
            return {}
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body", "body")
        return payload if isinstance(payload, dict) else {}
    if (
        "application/x-www-form-urlencoded" in content_type
        or "multipart/form-data" in content_type
    ):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
