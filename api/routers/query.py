# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-20
# Description: query router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_query_service
from api.errors import to_http_exception
from api.schemas.query import QueryMatch, QueryRequest, QueryResponse
from services.KBQueryService import KBQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
def post_query(
    req: QueryRequest,
    svc: KBQueryService = Depends(get_query_service),
) -> QueryResponse:
    logger.info("POST /query (start) q=%r", req.q)

    result = svc.query(req.q)
    if not result.ok:
        logger.warning("POST /query -> %s: %s", result.error_kind.value, result.error)
        raise to_http_exception(result)

    ranked = result.value
    matches = None
    if req.include_matches:
        matches = [
            QueryMatch(
                doc_id=m.chunk.doc_id,
                chunk_index=m.chunk.chunk_index,
                title=m.chunk.title,
                category=m.chunk.category,
                score=m.score,
                text=m.chunk.text,
            )
            for m in ranked.matches
        ]

    logger.info("POST /query (done) tier=%s confidence=%d", ranked.tier.value, ranked.confidence)
    return QueryResponse(
        answer=ranked.answer,
        confidence=ranked.confidence,
        tier=ranked.tier.value,
        matches=matches,
    )
