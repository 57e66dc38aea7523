"""API Layer — FastAPI routes, request parsing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success responses are JSON; every error response is text/plain

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
