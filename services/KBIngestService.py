# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Updated: 2026-01-20
# Description: KBIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from chunking.KBChunker import KBChunker
from embedding.KBEmbeddingProvider import KBEmbeddingProvider
from ingestion.sample_documents import SAMPLE_DOCUMENTS
from services.KBServiceResult import ServiceResult
from utility.keyed_lock import KeyedLock
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


@dataclass(frozen=True)
class IngestSummary:
    doc_id: str
    chunk_count: int
    replaced_chunks: int = 0


@dataclass(frozen=True)
class SampleLoadSummary:
    documents_added: int
    chunks_created: int


class KBIngestService:
    """
    Owns the ingest pipeline for one document:
      - chunk
      - embed (one provider call)
      - replace the document's chunks in the store (delete, then insert)

    Delete + insert for a doc_id run under a per-doc_id lock. They are still
    two store calls: a crash between them leaves the document absent.
    """

    def __init__(
        self,
        *,
        store: KBVectorStore,
        embedder: KBEmbeddingProvider,
        chunker: KBChunker,
        doc_locks: KeyedLock | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.chunker = chunker
        self.doc_locks = doc_locks or KeyedLock()
        self.logger = logger or get_class_logger(self.__class__)

    def ingest(
        self,
        doc_id: Optional[str],
        text: Optional[str],
        *,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> ServiceResult[IngestSummary]:
        doc_id = (doc_id or "").strip()
        if not doc_id or not isinstance(text, str) or not text:
            return ServiceResult.validation_error("Document ID and text are required")

        self.logger.info("Adding document: %s", doc_id)

        chunks = self.chunker.chunk_document(doc_id, text, title=title, category=category)
        if not chunks:
            return ServiceResult.validation_error("No valid text found")

        try:
            vectors = self.embedder.embed_texts([c.text for c in chunks])
        except Exception as e:
            self.logger.exception("Embedding failed for doc_id '%s': %s", doc_id, e)
            return ServiceResult.upstream_error(f"Embedding provider error: {e}")

        if len(vectors) != len(chunks):
            self.logger.error(
                "Embedding count mismatch for doc_id '%s': %d != %d",
                doc_id,
                len(vectors),
                len(chunks),
            )
            return ServiceResult.upstream_error(
                f"Embedding count mismatch: {len(vectors)} != {len(chunks)}"
            )

        for chunk, vector in zip(chunks, vectors):
            chunk.embedding = list(vector)

        with self.doc_locks.hold(doc_id):
            try:
                replaced = self.store.delete_by_doc_id(doc_id)
            except Exception as e:
                self.logger.exception("Failed to clear existing chunks for doc_id '%s': %s", doc_id, e)
                return ServiceResult.upstream_error(f"Document store error: {e}")

            try:
                self.store.insert_chunks(chunks)
            except Exception as e:
                # previous version already deleted; the document is now absent
                self.logger.exception(
                    "Insert failed for doc_id '%s' after deleting %d old chunks: %s",
                    doc_id,
                    replaced,
                    e,
                )
                return ServiceResult.upstream_error(f"Document store error: {e}")

        self.logger.info(
            "Stored doc_id '%s': %d chunks (replaced %d)",
            doc_id,
            len(chunks),
            replaced,
        )
        return ServiceResult.success(
            IngestSummary(doc_id=doc_id, chunk_count=len(chunks), replaced_chunks=replaced)
        )

    def load_sample_data(
        self,
        documents: Iterable[Dict[str, Any]] = SAMPLE_DOCUMENTS,
    ) -> ServiceResult[SampleLoadSummary]:
        """Replace the whole corpus with the bundled sample documents."""
        docs = list(documents)

        try:
            cleared = self.store.delete_all()
        except Exception as e:
            self.logger.exception("Failed to clear corpus before loading samples: %s", e)
            return ServiceResult.upstream_error(f"Document store error: {e}")

        self.logger.info("Cleared %d chunks; loading %d sample documents", cleared, len(docs))

        total_chunks = 0
        for doc in docs:
            metadata = doc.get("metadata") or {}
            result = self.ingest(
                doc.get("doc_id"),
                doc.get("text"),
                title=metadata.get("title"),
                category=metadata.get("category"),
            )
            if not result.ok:
                self.logger.error("Sample load stopped at doc_id '%s': %s", doc.get("doc_id"), result.error)
                return ServiceResult(error_kind=result.error_kind, error=result.error)
            total_chunks += result.value.chunk_count

        return ServiceResult.success(
            SampleLoadSummary(documents_added=len(docs), chunks_created=total_chunks)
        )
