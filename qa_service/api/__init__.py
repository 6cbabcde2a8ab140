"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share one JSON envelope

Design Decisions:
    - Thin routes delegate to services/ handlers
"""
