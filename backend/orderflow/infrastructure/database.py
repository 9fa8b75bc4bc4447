"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions leaving session() are mapped to StoreError
    - Errors raised by the caller inside session() (domain errors, cancellation)
      pass through untouched; the session is still closed

Design Decisions:
    - One manager built in the FastAPI lifespan and injected into the SQL
      repository: no module-level engine
    - expire_on_commit=False: rows stay readable after commit in async context
    - Pool sizing only applied to server databases; SQLite uses its own pools
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from orderflow.core.errors import StoreError
from orderflow.db.base import Base

logger = logging.getLogger(__name__)

_BACKEND = "database"


def _engine_kwargs(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine: AsyncEngine = create_async_engine(
            database_url, **_engine_kwargs(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"backend": _BACKEND})
            raise StoreError("Integrity constraint violated", _BACKEND, "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"backend": _BACKEND})
            raise StoreError("Connection or operational error", _BACKEND, "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"backend": _BACKEND})
            raise StoreError("Database driver error", _BACKEND, "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"backend": _BACKEND})
            raise StoreError("Database operation failed", _BACKEND, "unknown") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (CREATE TABLE IF NOT EXISTS semantics)."""
        # Registers OrderRecord on Base.metadata
        from orderflow.models import order as _model_order  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}", extra={"backend": _BACKEND})
            raise StoreError("Schema creation failed", _BACKEND, "create_schema") from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (StoreError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()
