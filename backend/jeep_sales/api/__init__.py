"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every non-success response has the same shape (core/errors.build_error_body)
"""
