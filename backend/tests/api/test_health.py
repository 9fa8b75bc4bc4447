"""Health Probes — liveness always up, readiness follows backend connectivity.

Tests cover:
    - GET /api/v1/health/ → 200 without a session
    - GET /api/v1/health/ready → 200 when the session store answers
    - Unreachable session store or database → 503 naming the failed check
"""

from unittest.mock import AsyncMock

from orderflow.main import app


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_memory_backends(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"session_store": "healthy"}}


async def test_readiness_fails_when_session_store_down(client):
    store = AsyncMock()
    store.ping.return_value = False
    app.state.key_value_store = store

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["checks"]["session_store"] == "unavailable"


async def test_readiness_checks_database_when_configured(client):
    db_manager = AsyncMock()
    db_manager.health_check.return_value = False
    app.state.db_manager = db_manager

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["checks"] == {
        "database": "unavailable", "session_store": "healthy",
    }
