"""Persistence Layer — SQLAlchemy implementations of the DAO protocols.

Invariants:
    - Each DAO owns a handle to the shared DatabaseSessionManager, passed in explicitly
    - DAOs raise only InvalidIdentifierError or StoreFailureError
"""
