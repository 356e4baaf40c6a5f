"""
Recipe API - Root & Health Check Routes
=========================================

What:  GET / (liveness, always {"message": "Ok"}) and GET /health
       (readiness, checks the database).
Who:   Load balancers, Docker health checks, monitoring.

Status levels:
    - healthy:   database answers SELECT 1 (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from recipe_api import __version__
from recipe_api.database import Database, get_database
from recipe_api.schemas.common import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_model=MessageResponse, summary="Root endpoint")
async def root() -> MessageResponse:
    return MessageResponse(message="Ok")


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    database: Database = Depends(get_database),
) -> HealthResponse:
    """
    Probe the database with SELECT 1 and report aggregate status.

    Why lightweight: health checks run every few seconds.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
