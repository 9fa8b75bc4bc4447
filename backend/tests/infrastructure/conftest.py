"""Infrastructure fixtures — both OrderRepository variants over fresh storage.

Invariants:
    - Every test gets an empty repository
    - The SQL variant runs on a file-backed SQLite database in tmp_path, so
      separate sessions see each other's commits
"""

import pytest

from orderflow.infrastructure.database import DatabaseSessionManager
from orderflow.infrastructure.repositories.memory import InMemoryOrderRepository
from orderflow.infrastructure.repositories.sql import SqlOrderRepository


@pytest.fixture
async def sql_db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}",
    )
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture(params=["memory", "sql"])
def repository(request):
    """Parametrized over both variants: contract tests run twice."""
    if request.param == "memory":
        return InMemoryOrderRepository()
    manager = request.getfixturevalue("sql_db_manager")
    return SqlOrderRepository(manager)
