"""Domain Types — identifier aliases and the nil-identifier sentinel.

Invariants:
    - NIL_UUID (all zeros) means "no identifier"; DAOs reject it before any IO
    - parse_identifier never raises: malformed input becomes NIL_UUID

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Malformed path ids coerced to NIL_UUID rather than rejected here, so a typo
      surfaces as the DAO's invalid-identifier error (observable API behavior)
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)

NIL_UUID = UUID(int=0)


def is_nil(identifier: UUID) -> bool:
    """True when identifier is the all-zero sentinel."""
    return identifier == NIL_UUID


def parse_identifier(raw: str) -> UUID:
    """Parse a path segment into a UUID, falling back to NIL_UUID."""
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        return NIL_UUID
