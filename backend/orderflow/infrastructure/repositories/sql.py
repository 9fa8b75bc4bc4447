"""SQL Order Repository — OrderRepository over the `orders` table.

Invariants:
    - Every operation is one parameterised statement in its own session (atomic per call)
    - Duplicate id on create → OrderAlreadyExistsError, via the primary-key constraint
    - update/delete affecting zero rows → OrderNotFoundError
    - Any other database failure → StoreError (from DatabaseSessionManager), never not-found
    - No in-process state: the table is the source of truth

Design Decisions:
    - Core-style insert/update/delete statements instead of ORM unit-of-work:
      one round trip, rowcount tells us whether the id existed
    - Concurrent updates to one id are last-writer-wins at the database
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from orderflow.core.domain_types import Order, OrderId
from orderflow.core.errors import OrderAlreadyExistsError, OrderNotFoundError
from orderflow.infrastructure.database import DatabaseSessionManager
from orderflow.models.order import OrderRecord

logger = logging.getLogger(__name__)


class SqlOrderRepository:
    """OrderRepository persisting to a relational database."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def create(self, order: Order) -> None:
        async with self._db.session() as db:
            try:
                await db.execute(
                    insert(OrderRecord).values(
                        id=order.id, item=order.item, quantity=order.quantity,
                    ),
                )
                await db.commit()
            except IntegrityError:
                await db.rollback()
                raise OrderAlreadyExistsError(order.id)

    async def get(self, order_id: OrderId) -> Order:
        async with self._db.session() as db:
            result = await db.execute(
                select(OrderRecord).where(OrderRecord.id == order_id),
            )
            record = result.scalar_one_or_none()
        if record is None:
            raise OrderNotFoundError(order_id)
        return record.to_domain()

    async def update(self, order: Order) -> None:
        async with self._db.session() as db:
            result = await db.execute(
                update(OrderRecord)
                .where(OrderRecord.id == order.id)
                .values(item=order.item, quantity=order.quantity)
                .execution_options(synchronize_session=False),
            )
            affected = result.rowcount
            await db.commit()
        if affected == 0:
            raise OrderNotFoundError(order.id)

    async def delete(self, order_id: OrderId) -> None:
        async with self._db.session() as db:
            result = await db.execute(
                delete(OrderRecord)
                .where(OrderRecord.id == order_id)
                .execution_options(synchronize_session=False),
            )
            affected = result.rowcount
            await db.commit()
        if affected == 0:
            raise OrderNotFoundError(order_id)

    async def list(self) -> list[Order]:
        async with self._db.session() as db:
            result = await db.execute(select(OrderRecord))
            return [record.to_domain() for record in result.scalars().all()]
