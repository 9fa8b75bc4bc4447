"""Test doubles shared across suites.

Invariants:
    - FakeClock only moves when advance() is called
    - SlowOrderRepository never completes an operation on its own
"""

import asyncio

from orderflow.core.domain_types import Order, OrderId


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SlowOrderRepository:
    """OrderRepository whose calls hang until cancelled; records cancellations."""

    def __init__(self) -> None:
        self.cancelled: list[str] = []

    async def _hang(self, operation: str):
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled.append(operation)
            raise

    async def create(self, order: Order) -> None:
        await self._hang("create")

    async def get(self, order_id: OrderId) -> Order:
        await self._hang("get")

    async def update(self, order: Order) -> None:
        await self._hang("update")

    async def delete(self, order_id: OrderId) -> None:
        await self._hang("delete")

    async def list(self):
        await self._hang("list")
