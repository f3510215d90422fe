# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-20
# Description: KBQueryService
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Optional

from embedding.KBEmbeddingProvider import KBEmbeddingProvider
from retrieval.KBRetrievalRanker import KBRetrievalRanker, RankedAnswer
from services.KBServiceResult import ServiceResult
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


class KBQueryService:
    """
    Answers a question: embed it, scan the whole store, let the ranker pick.
    """

    def __init__(
        self,
        *,
        store: KBVectorStore,
        embedder: KBEmbeddingProvider,
        ranker: KBRetrievalRanker,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.ranker = ranker
        self.logger = logger or get_class_logger(self.__class__)

    def query(self, question: Optional[str]) -> ServiceResult[RankedAnswer]:
        question = (question or "").strip()
        if not question:
            return ServiceResult.validation_error("Question is required")

        self.logger.info("Searching knowledge base for: %r", question)

        try:
            vectors = self.embedder.embed_texts([question])
        except Exception as e:
            self.logger.exception("Query embedding failed: %s", e)
            return ServiceResult.upstream_error(f"Embedding provider error: {e}")

        if not vectors or vectors[0] is None:
            self.logger.error("Embedding provider returned no vector for the question")
            return ServiceResult.upstream_error("Embedding provider returned no vector for the question")

        try:
            corpus = self.store.find_all()
        except Exception as e:
            self.logger.exception("Document store scan failed: %s", e)
            return ServiceResult.upstream_error(f"Document store error: {e}")

        return ServiceResult.success(self.ranker.rank_and_answer(vectors[0], corpus))
