# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-20
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

import settings
from chunking.KBChunker import KBChunker
from config.Config import Config
from embedding.KBEmbedder import KBEmbedder
from embedding.KBEmbeddingProvider import KBEmbeddingProvider
from health.TestRunner import TestRunner
from retrieval.KBRetrievalRanker import KBRetrievalRanker
from services.KBDocumentService import KBDocumentService
from services.KBHealthService import KBHealthService
from services.KBIngestService import KBIngestService
from services.KBQueryService import KBQueryService
from services.KBStatsService import KBStatsService
from utility.keyed_lock import KeyedLock
from utility.logging_utils import get_class_logger
from vectorstore.ChromaKBVectorStore import ChromaKBVectorStore
from vectorstore.KBVectorStore import KBVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Everything a service needs is handed to it here; nothing reads globals.

    `store` / `embedder` may be injected (tests, local runs); otherwise they
    are built from `cfg`.
    """

    def __init__(
        self,
        cfg: Optional[Config] = None,
        *,
        store: Optional[KBVectorStore] = None,
        embedder: Optional[KBEmbeddingProvider] = None,
        collection_name: str = settings.VECTOR_COLLECTION_DEFAULT,
        chunk_max_length: int = settings.CHUNK_MAX_LENGTH,
        high_threshold: float = settings.HIGH_THRESHOLD,
        medium_threshold: float = settings.MEDIUM_THRESHOLD,
        top_k: int = settings.TOP_K,
        embed_batch_size: int = settings.EMBED_BATCH_SIZE,
        embed_expected_dim: int = settings.EMBED_EXPECTED_DIM,
    ) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration (only needed for the real backends)
        if store is None or embedder is None:
            self.cfg = cfg or Config.from_env()
            self.logger.info("Config: %s", self.cfg.summary())
        else:
            self.cfg = cfg

        # Core infrastructure
        self.embedder = embedder or KBEmbedder(cfg=self.cfg, batch_size=embed_batch_size)
        self.store = store or ChromaKBVectorStore(cfg=self.cfg, collection_name=collection_name)

        # Pure retrieval core
        self.chunker = KBChunker(max_length=chunk_max_length)
        self.ranker = KBRetrievalRanker(
            high_threshold=high_threshold,
            medium_threshold=medium_threshold,
            top_k=top_k,
        )

        # Serialises ingest/delete per doc_id across services
        self.doc_locks = KeyedLock()

        self.ingest_service = KBIngestService(
            store=self.store,
            embedder=self.embedder,
            chunker=self.chunker,
            doc_locks=self.doc_locks,
        )

        self.query_service = KBQueryService(
            store=self.store,
            embedder=self.embedder,
            ranker=self.ranker,
        )

        self.document_service = KBDocumentService(
            store=self.store,
            doc_locks=self.doc_locks,
        )

        self.stats_service = KBStatsService(
            store=self.store,
            collection_name=collection_name,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(
            self.store,
            self.embedder,
            expected_dim=embed_expected_dim or None,
        )
        self.health_service = KBHealthService(store=self.store, test_runner=self.test_runner)
