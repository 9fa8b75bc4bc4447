"""Order Service — the operations protected routes run against the repository.

Invariants:
    - A blank id on create is replaced by a server-generated one before storage
    - update always uses the id given by the caller (the path), never one from the body
    - Repository outcomes pass through unchanged: OrderNotFoundError,
      OrderAlreadyExistsError, StoreError
    - Every repository call runs under the configured deadline
    - The acting user is used for audit logging only, never for authorization

Design Decisions:
    - Works on any OrderRepository (memory or SQL), chosen at startup
"""

import logging

from orderflow.core.domain_types import AuthenticatedUser, Order, OrderId, new_order_id
from orderflow.core.repository_protocols import OrderRepository
from orderflow.services.deadlines import run_with_deadline

logger = logging.getLogger(__name__)


class OrderService:
    """Create/read/update/delete orders on behalf of an authenticated user."""

    def __init__(
        self, repository: OrderRepository, timeout_seconds: float | None = None,
    ):
        self._repository = repository
        self._timeout = timeout_seconds

    async def create_order(
        self, user: AuthenticatedUser, item: str, quantity: int, order_id: str = "",
    ) -> Order:
        order = Order(
            id=OrderId(order_id) if order_id else new_order_id(),
            item=item,
            quantity=quantity,
        )
        await run_with_deadline(
            self._repository.create(order), "order.create", self._timeout,
        )
        logger.info(
            "Order created",
            extra={"username": user.username, "order_id": order.id},
        )
        return order

    async def get_order(self, user: AuthenticatedUser, order_id: str) -> Order:
        return await run_with_deadline(
            self._repository.get(OrderId(order_id)), "order.get", self._timeout,
        )

    async def list_orders(self, user: AuthenticatedUser) -> list[Order]:
        return await run_with_deadline(
            self._repository.list(), "order.list", self._timeout,
        )

    async def update_order(
        self, user: AuthenticatedUser, order_id: str, item: str, quantity: int,
    ) -> Order:
        order = Order(id=OrderId(order_id), item=item, quantity=quantity)
        await run_with_deadline(
            self._repository.update(order), "order.update", self._timeout,
        )
        logger.info(
            "Order updated",
            extra={"username": user.username, "order_id": order.id},
        )
        return order

    async def delete_order(self, user: AuthenticatedUser, order_id: str) -> None:
        await run_with_deadline(
            self._repository.delete(OrderId(order_id)), "order.delete", self._timeout,
        )
        logger.info(
            "Order deleted",
            extra={"username": user.username, "order_id": order_id},
        )
