# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-20
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, Response

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.KBHealthService import KBHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check(
    response: Response,
    svc: KBHealthService = Depends(get_health_service),
) -> HealthResponse:
    result = svc.health()
    if result.status != "healthy":
        logger.warning("GET /health -> unhealthy: %s", result.error)
        response.status_code = 500
    return result


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: KBHealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called")
    result = svc.deep_health()
    logger.info("GET /health/deep completed: status=%s", result.status)
    return result
