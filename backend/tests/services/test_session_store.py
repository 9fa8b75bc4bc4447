"""Session Store — token issue, resolution, expiry, revocation, deadlines.

Invariants:
    - create_session → resolve round trip under the "session:<token>" key
    - Expiry after the TTL is indistinguishable from a never-issued token
    - Blank or unknown tokens raise UnauthenticatedError
    - Tokens are unique and high-entropy
    - revoke deletes the record
    - A backend that hangs → DeadlineExceededError; a failing one → StoreError

Design Decisions:
    - FakeClock drives expiry; no test sleeps through a TTL
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from orderflow.core.domain_types import Username
from orderflow.core.errors import DeadlineExceededError, StoreError, UnauthenticatedError
from orderflow.infrastructure.key_value import InMemoryKeyValueStore
from orderflow.services.session_store import SessionStore, session_key
from tests.fakes import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def kv(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def sessions(kv):
    return SessionStore(kv, ttl_seconds=3600)


async def test_create_then_resolve_returns_username(sessions):
    token = await sessions.create_session(Username("alice"))
    assert await sessions.resolve(token) == "alice"


async def test_record_stored_under_prefixed_key(sessions, kv):
    token = await sessions.create_session(Username("alice"))
    assert session_key(token) == f"session:{token}"
    assert await kv.get(f"session:{token}") == "alice"


async def test_session_expires_after_ttl(sessions, clock):
    token = await sessions.create_session(Username("alice"))

    clock.advance(3599)
    assert await sessions.resolve(token) == "alice"

    clock.advance(1)
    with pytest.raises(UnauthenticatedError):
        await sessions.resolve(token)


async def test_never_issued_token_is_rejected(sessions):
    with pytest.raises(UnauthenticatedError):
        await sessions.resolve("not-a-real-token")


@pytest.mark.parametrize("token", ["", None])
async def test_blank_token_is_rejected_without_lookup(token):
    store = AsyncMock()
    sessions = SessionStore(store)
    with pytest.raises(UnauthenticatedError):
        await sessions.resolve(token)
    store.get.assert_not_awaited()


async def test_empty_stored_username_is_rejected(sessions, kv):
    await kv.set(session_key("tok"), "", 3600)
    with pytest.raises(UnauthenticatedError):
        await sessions.resolve("tok")


async def test_tokens_are_unique_and_high_entropy(sessions):
    tokens = {await sessions.create_session(Username("alice")) for _ in range(50)}
    assert len(tokens) == 50
    # token_urlsafe(32) → 43 url-safe characters
    assert all(len(t) >= 43 for t in tokens)


async def test_same_user_may_hold_several_sessions(sessions):
    first = await sessions.create_session(Username("alice"))
    second = await sessions.create_session(Username("alice"))
    assert await sessions.resolve(first) == "alice"
    assert await sessions.resolve(second) == "alice"


async def test_revoke_invalidates_session(sessions):
    token = await sessions.create_session(Username("alice"))

    assert await sessions.revoke(token) is True
    with pytest.raises(UnauthenticatedError):
        await sessions.resolve(token)
    assert await sessions.revoke(token) is False


async def test_revoke_blank_token_is_noop(sessions):
    assert await sessions.revoke(None) is False
    assert await sessions.revoke("") is False


async def test_hanging_backend_hits_deadline():
    store = AsyncMock()

    async def hang(*args, **kwargs):
        await asyncio.Event().wait()

    store.get.side_effect = hang
    sessions = SessionStore(store, timeout_seconds=0.05)

    with pytest.raises(DeadlineExceededError) as exc_info:
        await sessions.resolve("tok")
    assert exc_info.value.context.operation == "session.resolve"


async def test_backend_failure_propagates_as_store_error():
    store = AsyncMock()
    store.set.side_effect = StoreError("refused", "redis", "set")
    sessions = SessionStore(store)

    with pytest.raises(StoreError):
        await sessions.create_session(Username("alice"))
