"""Core Layer — identifiers, error taxonomy, and persistence contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or persistence/
    - No IO, no async work performed here

Design Decisions:
    - Contracts live in core, implementations in persistence/ (dependency arrows point inward)
"""
