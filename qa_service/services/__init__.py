"""Service Layer — request handlers between the API routes and the DAOs.

Invariants:
    - Handlers take typed input plus a DAO protocol, never a Request
    - DAO errors are translated here, nothing else is caught
"""
