# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Updated: 2026-01-20
# Description: KBStatsService.py
# -----------------------------------------------------------------------------

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from services.KBServiceResult import ServiceResult
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


@dataclass(frozen=True)
class DocumentEntry:
    doc_id: str
    chunk_count: int
    title: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CorpusStats:
    collection_name: str
    total_chunks: int
    total_documents: int
    documents: List[DocumentEntry] = field(default_factory=list)


class KBStatsService:
    """
    Stats service for the /stats endpoint.

    Responsibilities:
      - scan the store once
      - group chunks per doc_id (first-seen order)
    """

    def __init__(
        self,
        *,
        store: KBVectorStore,
        collection_name: str,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.collection_name = collection_name
        self.logger = logger or get_class_logger(self.__class__)

    def get_stats(self) -> ServiceResult[CorpusStats]:
        self.logger.info("Stats for collection='%s'", self.collection_name)

        try:
            chunks = self.store.find_all()
        except Exception as e:
            self.logger.exception("Failed to scan collection '%s': %s", self.collection_name, e)
            return ServiceResult.upstream_error(f"Document store error: {e}")

        counts: Dict[str, int] = {}
        firsts = {}
        for c in chunks:
            counts[c.doc_id] = counts.get(c.doc_id, 0) + 1
            firsts.setdefault(c.doc_id, c)

        documents = [
            DocumentEntry(
                doc_id=doc_id,
                chunk_count=n,
                title=firsts[doc_id].title,
                category=firsts[doc_id].category,
                created_at=firsts[doc_id].created_at.isoformat(),
            )
            for doc_id, n in counts.items()
        ]

        return ServiceResult.success(
            CorpusStats(
                collection_name=self.collection_name,
                total_chunks=len(chunks),
                total_documents=len(documents),
                documents=documents,
            )
        )
