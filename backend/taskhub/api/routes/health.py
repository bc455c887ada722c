"""Health Probes — liveness and readiness, both outside API key auth.

Invariants:
    - GET /health/ answers 200 while the process runs and lists the resource
      paths this instance serves (straight from the registry)
    - GET /health/ready answers 200 only when storage is reachable; otherwise
      503 with the same body shape and the failing check marked
    - Probes expose no entities and never call the engine
"""

import logging

from fastapi import APIRouter, Response, status

from taskhub.core.resource_registry import RESOURCE_REGISTRY
from taskhub.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "taskhub-gateway"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "resources": sorted(c.path for c in RESOURCE_REGISTRY.values()),
    }


@router.get("/ready")
async def readiness(response: Response):
    """Storage check through the process-wide session manager."""
    checks = {"database": await _database_check()}
    ready = all(state == "healthy" for state in checks.values())
    if not ready:
        logger.warning("Readiness probe failed", extra={"path": "/health/ready"})
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": "ready" if ready else "not_ready", "checks": checks}


async def _database_check() -> str:
    manager = database.db_manager
    if manager is None:
        return "uninitialized"
    return "healthy" if await manager.health_check() else "unavailable"
