"""Domain Types — the Order value object and the identity types around it.

Invariants:
    - Order.id is never empty (constructing one with a blank id raises ValueError)
    - Order is immutable; updates replace the whole value
    - Session tokens and usernames are distinct types, never bare str in signatures

Design Decisions:
    - Frozen dataclass for Order: repositories can hand out the stored instance
      without defensive copies
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Server-generated order ids are UUID4 hex strings
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)
SessionToken = NewType("SessionToken", str)
Username = NewType("Username", str)


# ─── Entity ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Order:
    """A customer order: identifier, item label and quantity."""
    id: OrderId
    item: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("order id must be non-empty")


def new_order_id() -> OrderId:
    """Generate a server-side order identifier."""
    return OrderId(uuid.uuid4().hex)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved by the session gate for one request.

    Threaded explicitly from the route into services for audit logging.
    Carries no permissions.
    """
    username: Username
    session_token: SessionToken


# ─── Enums ───────────────────────────────────────────────────────

class RepositoryBackend(str, Enum):
    """Order storage variants selectable at startup."""
    MEMORY = "memory"
    SQL = "sql"


class SessionBackend(str, Enum):
    """Key-value providers for session records."""
    MEMORY = "memory"
    REDIS = "redis"
