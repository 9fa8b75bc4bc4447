"""Key-Value Stores — session record backends (Redis and in-process).

Invariants:
    - set() always carries a TTL; expiry is enforced by the backend, not by callers
    - get() returns None for absent and expired keys alike
    - Redis failures (connection, timeout, protocol) are mapped to StoreError
    - No retries here: retry policy belongs to the caller

Design Decisions:
    - redis.asyncio client with decode_responses=True: values come back as str
    - InMemoryKeyValueStore takes an injectable clock so TTL expiry is testable
      without sleeping; used for single-process runs (SESSION_BACKEND=memory)
"""

import asyncio
import logging
import time
from typing import Callable

from redis.asyncio import Redis
from redis.exceptions import RedisError

from orderflow.core.errors import StoreError

logger = logging.getLogger(__name__)

_REDIS = "redis"


class RedisKeyValueStore:
    """KeyValueStore backed by Redis SET EX / GET / DEL."""

    def __init__(
        self,
        url: str,
        socket_timeout_seconds: float = 2.0,
        client: Redis | None = None,
    ):
        self.client = client or Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout_seconds,
            socket_connect_timeout=socket_timeout_seconds,
        )

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self.client.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            logger.error(f"Redis SET failed: {e}", extra={"backend": _REDIS})
            raise StoreError(str(e), _REDIS, "set") from e

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(key)
        except RedisError as e:
            logger.error(f"Redis GET failed: {e}", extra={"backend": _REDIS})
            raise StoreError(str(e), _REDIS, "get") from e

    async def delete(self, key: str) -> bool:
        try:
            return bool(await self.client.delete(key))
        except RedisError as e:
            logger.error(f"Redis DEL failed: {e}", extra={"backend": _REDIS})
            raise StoreError(str(e), _REDIS, "delete") from e

    async def ping(self) -> bool:
        """Connectivity check for readiness probes."""
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping failed: {e}", extra={"backend": _REDIS})
            return False

    async def close(self) -> None:
        await self.client.aclose()


class InMemoryKeyValueStore:
    """KeyValueStore in a process-local dict with TTL expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        async with self._lock:
            self._entries[key] = (value, self._clock() + ttl_seconds)

    async def get(self, key: str) -> str | None:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    async def delete(self, key: str) -> bool:
        async with self._lock:
            entry = self._entries.pop(key, None)
            return entry is not None and self._clock() < entry[1]

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        async with self._lock:
            self._entries.clear()
