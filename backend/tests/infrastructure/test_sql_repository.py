"""SQL Repository — storage failures and schema behaviour specific to the SQL variant.

Invariants:
    - A broken table surfaces as StoreError, never OrderNotFoundError
    - create_schema is idempotent (CREATE TABLE IF NOT EXISTS)
    - Data is visible through a second repository on the same database
    - Concurrent creates with distinct ids are all visible afterwards
    - Health check reports connectivity

Design Decisions:
    - File-backed SQLite (tmp_path): each session opens its own connection,
      so concurrent writers contend the way separate requests do
"""

import asyncio

import pytest
from sqlalchemy import text

from orderflow.core.domain_types import Order, OrderId
from orderflow.core.errors import OrderNotFoundError, StoreError
from orderflow.infrastructure.repositories.sql import SqlOrderRepository


async def _drop_orders_table(manager):
    async with manager.engine.begin() as conn:
        await conn.execute(text("DROP TABLE orders"))


async def test_missing_table_raises_store_error_on_get(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    await _drop_orders_table(sql_db_manager)

    with pytest.raises(StoreError) as exc_info:
        await repo.get(OrderId("1"))
    assert not isinstance(exc_info.value, OrderNotFoundError)
    assert exc_info.value.http_status == 500


async def test_missing_table_raises_store_error_on_list(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    await _drop_orders_table(sql_db_manager)

    with pytest.raises(StoreError):
        await repo.list()


async def test_missing_table_raises_store_error_on_delete(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    await _drop_orders_table(sql_db_manager)

    with pytest.raises(StoreError):
        await repo.delete(OrderId("1"))


async def test_create_schema_is_idempotent(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    await repo.create(Order(OrderId("1"), "Widget", 2))

    await sql_db_manager.create_schema()

    assert await repo.get(OrderId("1")) == Order(OrderId("1"), "Widget", 2)


async def test_table_is_source_of_truth_across_repositories(sql_db_manager):
    writer = SqlOrderRepository(sql_db_manager)
    reader = SqlOrderRepository(sql_db_manager)

    await writer.create(Order(OrderId("shared"), "Widget", 4))

    assert await reader.get(OrderId("shared")) == Order(OrderId("shared"), "Widget", 4)


async def test_health_check_reports_connectivity(sql_db_manager):
    assert await sql_db_manager.health_check() is True


async def test_concurrent_creates_with_distinct_ids_all_visible(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    orders = [Order(OrderId(f"o-{i}"), "Widget", i) for i in range(20)]

    await asyncio.gather(*(repo.create(o) for o in orders))

    assert set(await repo.list()) == set(orders)


async def test_concurrent_creates_one_and_two(sql_db_manager):
    repo = SqlOrderRepository(sql_db_manager)
    await asyncio.gather(
        repo.create(Order(OrderId("1"), "Widget", 1)),
        repo.create(Order(OrderId("2"), "Gadget", 2)),
    )
    assert {o.id for o in await repo.list()} == {"1", "2"}
