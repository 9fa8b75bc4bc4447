"""In-Memory Order Repository — dict-backed OrderRepository for single-process runs.

Invariants:
    - The dict is only touched under the ReadWriteLock: get/list share, create/update/delete exclude
    - create on an existing id raises OrderAlreadyExistsError (same policy as the SQL variant)
    - list returns a fresh list; callers may mutate it freely
    - Runtime failures only on programmer error; never StoreError

Design Decisions:
    - Stored values are frozen Order instances, so reads hand them out without copying
    - Data is lost on restart; selected with REPOSITORY_BACKEND=memory
"""

from orderflow.core.domain_types import Order, OrderId
from orderflow.core.errors import OrderAlreadyExistsError, OrderNotFoundError
from orderflow.infrastructure.concurrency import ReadWriteLock


class InMemoryOrderRepository:
    """OrderRepository over a lock-guarded dict."""

    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}
        self._lock = ReadWriteLock()

    async def create(self, order: Order) -> None:
        async with self._lock.write():
            if order.id in self._orders:
                raise OrderAlreadyExistsError(order.id)
            self._orders[order.id] = order

    async def get(self, order_id: OrderId) -> Order:
        async with self._lock.read():
            order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def update(self, order: Order) -> None:
        async with self._lock.write():
            if order.id not in self._orders:
                raise OrderNotFoundError(order.id)
            self._orders[order.id] = order

    async def delete(self, order_id: OrderId) -> None:
        async with self._lock.write():
            if self._orders.pop(order_id, None) is None:
                raise OrderNotFoundError(order_id)

    async def list(self) -> list[Order]:
        async with self._lock.read():
            return list(self._orders.values())
