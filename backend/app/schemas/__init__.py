"""Pydantic Schemas — response shapes and query normalization for API endpoints.

Invariants:
    - Schemas describe the wire contract; models are persistence
    - Field-level write constraints live in core/validation_rules.py, not here

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
