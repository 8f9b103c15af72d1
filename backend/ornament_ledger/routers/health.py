"""
Liveness and readiness checks.

/health only proves the process answers. /health/ready also pings MongoDB;
it still returns 200 when the store is down, with status "degraded", so a
load balancer can tell a slow start from a dead process.
"""
import logging

from fastapi import APIRouter, status

from ornament_ledger import __version__
from ornament_ledger.database.connections import get_mongo_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


async def _mongodb_status() -> str:
    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
    except Exception as e:
        logger.warning("MongoDB readiness check failed: %s", e)
        return "unhealthy"
    return "healthy"


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def health_check():
    """Report that the API process is up, with its version."""
    return {"status": "healthy", "version": __version__}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
)
async def readiness_check():
    """Report API and MongoDB status; "degraded" when the store is unreachable."""
    checks = {
        "api": "healthy",
        "mongodb": await _mongodb_status(),
    }
    ready = all(state == "healthy" for state in checks.values())
    
    return {
        "status": "healthy" if ready else "degraded",
        "version": __version__,
        "checks": checks,
    }
