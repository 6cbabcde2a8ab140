"""Infrastructure Layer — connection pool and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions are mapped to core error types before leaving this layer
"""
