"""Deadlines — bound every backend call in time.

Invariants:
    - Exceeding the deadline raises DeadlineExceededError, distinct from
      not-found and store errors
    - The timed-out call is cancelled, not left running in the background
    - asyncio.CancelledError from the caller passes through unchanged
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from orderflow.core.errors import DeadlineExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_deadline(
    awaitable: Awaitable[T], operation: str, timeout_seconds: float | None,
) -> T:
    """Await `awaitable`, cancelling it after `timeout_seconds` (None = no deadline)."""
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.error(
            f"Deadline exceeded for {operation} after {timeout_seconds}s",
            extra={"operation": operation},
        )
        raise DeadlineExceededError(operation, timeout_seconds)
