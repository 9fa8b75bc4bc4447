"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the database (when configured)
      or the session key-value store is unreachable (readiness)
    - Both probes are public: no session required

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "orderflow-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — database and session store connectivity."""
    checks: dict[str, str] = {}

    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is not None:
        checks["database"] = (
            "healthy" if await db_manager.health_check() else "unavailable"
        )

    key_value_store = getattr(request.app.state, "key_value_store", None)
    kv_ok = await key_value_store.ping() if key_value_store else False
    checks["session_store"] = "healthy" if kv_ok else "unavailable"

    if any(v != "healthy" for v in checks.values()):
        logger.warning(f"Readiness check failed: {checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
