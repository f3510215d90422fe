# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-22
# Updated: 2026-01-20
# Description: documents.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class DocumentMetadata(BaseModel):
    title: Optional[str] = None
    category: Optional[str] = None


class IngestDocumentRequest(BaseModel):
    # empty values are rejected by the ingest service (400), not by pydantic (422)
    doc_id: str = Field("", validation_alias=AliasChoices("doc_id", "docId"))
    text: str = ""
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)


class IngestDocumentResponse(BaseModel):
    success: bool = True
    message: str
    doc_id: str
    chunks: int
    replaced_chunks: int = 0


class CountDocumentsResponse(BaseModel):
    success: bool = True
    count: int
    message: str


class ClearDocumentsResponse(BaseModel):
    success: bool = True
    deleted: int
    message: str


class DeleteDocumentResponse(BaseModel):
    success: bool = True
    doc_id: str
    deleted: int


class LoadSampleResponse(BaseModel):
    success: bool = True
    message: str
    documents_added: int
    chunks_created: int
