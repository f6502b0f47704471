"""
Bioskop API: Health Check Route
================================

What:  GET /health for container probes and uptime monitors.
How:   Pings the shared database handle with `SELECT 1` and reports the
       result with the app version and uptime.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200 so the probe body is readable)
"""

import logging
import time

from fastapi import APIRouter, Request

from bioskop_api import __version__
from bioskop_api.schemas.bioskop import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await request.app.state.db.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
