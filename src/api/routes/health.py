"""
Health check routes.

Provides endpoints for API and store health monitoring.
"""
from fastapi import APIRouter, Depends
from upstash_redis import Redis

from src.kv_store import check_connection

from ..dependencies import get_redis
from ..schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(redis: Redis = Depends(get_redis)) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        HealthResponse: API status and whether the store answers PING.
    """
    if check_connection(redis):
        return HealthResponse(status="healthy", store="ok")
    return HealthResponse(status="degraded", store="unreachable")
