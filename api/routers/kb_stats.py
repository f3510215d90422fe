# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-20
# Description: kb_stats.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends

from api.dependencies import get_stats_service
from api.errors import to_http_exception
from api.schemas.kb_stats import DocumentStats, KBStatsResponse
from services.KBStatsService import KBStatsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stats",
    tags=["stats"]
)

@router.get("", response_model=KBStatsResponse)
def get_kb_stats(
    svc: KBStatsService = Depends(get_stats_service),
) -> KBStatsResponse:
    logger.info("GET /stats")
    result = svc.get_stats()
    if not result.ok:
        raise to_http_exception(result)

    stats = result.value
    return KBStatsResponse(
        collection_name=stats.collection_name,
        total_chunks=stats.total_chunks,
        total_documents=stats.total_documents,
        documents=[DocumentStats(**asdict(d)) for d in stats.documents],
    )
