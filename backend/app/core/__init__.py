"""Core Layer — pure domain logic: errors, field rules, date handling. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure; only utc_now() reads the clock

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
