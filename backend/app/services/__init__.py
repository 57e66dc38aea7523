"""Services Layer — request handlers behind the HTTP routes.

Invariants:
    - Handlers receive their AsyncSession from the caller
    - Failures are raised as core/errors.py variants, never rendered here
"""
