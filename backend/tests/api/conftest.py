"""API test fixtures — the real app wired to in-process backends.

Invariants:
    - Every test gets an empty order repository and session store
    - Components are swapped through app.dependency_overrides, the same
      seams the lifespan fills in production
    - The client talks https so the Secure session cookie is sent back

Design Decisions:
    - httpx ASGITransport does not run the lifespan; app.state is set here
      for the readiness probe instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from orderflow.api.dependencies import (
    get_credential_verifier, get_order_service, get_session_store,
)
from orderflow.infrastructure.key_value import InMemoryKeyValueStore
from orderflow.infrastructure.repositories.memory import InMemoryOrderRepository
from orderflow.main import app
from orderflow.services.credentials import UsernameOnlyVerifier
from orderflow.services.order_service import OrderService
from orderflow.services.session_store import SessionStore
from tests.fakes import FakeClock

BASE_URL = "https://test"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def key_value_store(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def session_store(key_value_store):
    return SessionStore(key_value_store, ttl_seconds=3600)


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def order_service(order_repository):
    return OrderService(order_repository, timeout_seconds=1.0)


@pytest.fixture
async def client(order_service, session_store, key_value_store):
    """AsyncClient against the app with in-process backends."""
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_credential_verifier] = UsernameOnlyVerifier
    app.state.key_value_store = key_value_store
    app.state.db_manager = None

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def logged_in(client):
    """Client carrying a live session cookie for "alice"."""
    res = await client.post("/api/v1/login", json={"username": "alice"})
    assert res.status_code == 200
    return client
