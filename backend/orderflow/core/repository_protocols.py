"""Boundary Protocols — contracts between core and shell.

Invariants:
    - OrderRepository has exactly five operations: create, get, list, update, delete
    - get/update/delete raise OrderNotFoundError for unknown ids; create raises
      OrderAlreadyExistsError for a taken id, identically in every implementation
    - Backend failures surface as StoreError, never as not-found
    - All IO operations accessed through Protocol types, provided via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO and must honour task cancellation
"""

from typing import Protocol

from orderflow.core.domain_types import Order, OrderId, Username


class OrderRepository(Protocol):
    """Contract for order persistence — in-memory and SQL variants."""
    async def create(self, order: Order) -> None: ...
    async def get(self, order_id: OrderId) -> Order: ...
    async def list(self) -> list[Order]: ...
    async def update(self, order: Order) -> None: ...
    async def delete(self, order_id: OrderId) -> None: ...


class KeyValueStore(Protocol):
    """Contract for the session key-value capability (Redis or in-memory).

    get() returns None for absent and expired keys alike.
    """
    async def set(self, key: str, value: str, ttl_seconds: int) -> None: ...
    async def get(self, key: str) -> str | None: ...
    async def delete(self, key: str) -> bool: ...
    async def ping(self) -> bool: ...
    async def close(self) -> None: ...


class CredentialVerifier(Protocol):
    """Contract for checking login credentials before a session is issued."""
    async def verify(self, username: Username, password: str) -> bool: ...
