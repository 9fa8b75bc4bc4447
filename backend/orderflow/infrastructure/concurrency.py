"""Reader/Writer Lock — shared/exclusive access for asyncio tasks.

Invariants:
    - Any number of readers may hold the lock together
    - A writer holds it alone: no readers, no other writer
    - Waiting writers block new readers (writer preference, no writer starvation)
    - A task cancelled while waiting leaves the counters consistent and wakes
      the other waiters
    - Release never loses ownership: the counters are updated before the first
      await, so a release cancelled mid-way still frees the lock

Design Decisions:
    - Built on a single asyncio.Condition; acquisition is an await point, so
      cancellation and deadlines reach tasks queued on the lock
    - The wake-up after release runs shielded; waiters are notified even when
      the releasing task is cancelled
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Asyncio reader/writer lock with writer preference."""

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    def _can_read(self) -> bool:
        return not self._writer and self._waiting_writers == 0

    def _can_write(self) -> bool:
        return not self._writer and self._readers == 0

    async def _notify_waiters(self) -> None:
        async with self._cond:
            self._cond.notify_all()

    async def _wake(self) -> None:
        await asyncio.shield(self._notify_waiters())

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(self._can_read)
            self._readers += 1
        try:
            yield
        finally:
            self._readers -= 1
            if self._readers == 0:
                await self._wake()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(self._can_write)
            finally:
                self._waiting_writers -= 1
                # readers blocked on our waiting flag may proceed if we gave up
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            self._writer = False
            await self._wake()
