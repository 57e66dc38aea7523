"""Infrastructure Layer — database lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions are mapped to core/errors.py variants before leaving this layer
"""
