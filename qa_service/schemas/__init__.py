"""Pydantic Schemas — entity shapes shared by the API, handlers, and DAOs.

Invariants:
    - Fields models hold only caller-supplied attributes
    - Stored entities wrap a Fields model plus server-assigned id and timestamp

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
