# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-23
# Updated: 2026-01-20
# Description: documents.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_document_service, get_ingest_service
from api.errors import to_http_exception
from api.schemas.documents import (
    ClearDocumentsResponse,
    CountDocumentsResponse,
    DeleteDocumentResponse,
    IngestDocumentRequest,
    IngestDocumentResponse,
    LoadSampleResponse,
)
from services.KBDocumentService import KBDocumentService
from services.KBIngestService import KBIngestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/ingest", response_model=IngestDocumentResponse)
def post_ingest_document(
    req: IngestDocumentRequest,
    svc: KBIngestService = Depends(get_ingest_service),
) -> IngestDocumentResponse:
    logger.info("POST /documents/ingest (start) doc_id='%s'", req.doc_id)

    result = svc.ingest(
        req.doc_id,
        req.text,
        title=req.metadata.title,
        category=req.metadata.category,
    )
    if not result.ok:
        logger.warning("POST /documents/ingest -> %s doc_id='%s': %s", result.error_kind.value, req.doc_id, result.error)
        raise to_http_exception(result)

    summary = result.value
    logger.info("POST /documents/ingest (done) doc_id='%s' chunks=%d", summary.doc_id, summary.chunk_count)
    return IngestDocumentResponse(
        message="Document stored successfully",
        doc_id=summary.doc_id,
        chunks=summary.chunk_count,
        replaced_chunks=summary.replaced_chunks,
    )


@router.get("", response_model=CountDocumentsResponse)
def get_document_count(
    svc: KBDocumentService = Depends(get_document_service),
) -> CountDocumentsResponse:
    result = svc.count_chunks()
    if not result.ok:
        logger.warning("GET /documents -> %s: %s", result.error_kind.value, result.error)
        raise to_http_exception(result)

    count = result.value
    logger.info("GET /documents (done) count=%d", count)
    return CountDocumentsResponse(count=count, message=f"Knowledge base has {count} document chunks")


@router.delete("", response_model=ClearDocumentsResponse)
def delete_all_documents(
    svc: KBDocumentService = Depends(get_document_service),
) -> ClearDocumentsResponse:
    logger.info("DELETE /documents (start)")
    result = svc.clear_all()
    if not result.ok:
        logger.warning("DELETE /documents -> %s: %s", result.error_kind.value, result.error)
        raise to_http_exception(result)

    deleted = result.value
    logger.info("DELETE /documents (done) deleted=%d", deleted)
    return ClearDocumentsResponse(deleted=deleted, message=f"Cleared {deleted} document chunks")


@router.post("/sample", response_model=LoadSampleResponse)
def post_load_sample_data(
    svc: KBIngestService = Depends(get_ingest_service),
) -> LoadSampleResponse:
    logger.info("POST /documents/sample (start)")
    result = svc.load_sample_data()
    if not result.ok:
        logger.warning("POST /documents/sample -> %s: %s", result.error_kind.value, result.error)
        raise to_http_exception(result)

    summary = result.value
    logger.info(
        "POST /documents/sample (done) documents=%d chunks=%d",
        summary.documents_added,
        summary.chunks_created,
    )
    return LoadSampleResponse(
        message="Sample data loaded successfully",
        documents_added=summary.documents_added,
        chunks_created=summary.chunks_created,
    )


@router.delete("/{doc_id}", response_model=DeleteDocumentResponse)
def delete_document(
    doc_id: str,
    svc: KBDocumentService = Depends(get_document_service),
) -> DeleteDocumentResponse:
    logger.info("DELETE /documents/{doc_id} (start) doc_id='%s'", doc_id)
    result = svc.delete_document(doc_id)
    if not result.ok:
        logger.warning("DELETE /documents/{doc_id} -> %s doc_id='%s': %s", result.error_kind.value, doc_id, result.error)
        raise to_http_exception(result)

    logger.info("DELETE /documents/{doc_id} (done) doc_id='%s' deleted=%d", doc_id, result.value)
    return DeleteDocumentResponse(doc_id=doc_id.strip(), deleted=result.value)
