"""
Supermatech Backend: Health Check Route
=========================================

What:  GET /health for Docker health checks and load balancer probes.
How:   Runs SELECT 1 on the engine. The service is "healthy" only when the
       database answers, since every OrderLine operation needs it.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from supermatech import __version__
from supermatech.database import engine
from supermatech.schemas.order_line import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
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
