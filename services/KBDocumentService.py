# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-22
# Updated: 2026-01-20
# Description: KBDocumentService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Optional

from services.KBServiceResult import ServiceResult
from utility.keyed_lock import KeyedLock
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


class KBDocumentService:
    """
    Corpus-level operations: count, clear, delete one document.
    Shares the per-doc_id lock with KBIngestService.
    """

    def __init__(
        self,
        *,
        store: KBVectorStore,
        doc_locks: KeyedLock | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.doc_locks = doc_locks or KeyedLock()
        self.logger = logger or get_class_logger(self.__class__)

    def count_chunks(self) -> ServiceResult[int]:
        try:
            count = self.store.count()
        except Exception as e:
            self.logger.exception("Error counting chunks: %s", e)
            return ServiceResult.upstream_error(f"Document store error: {e}")
        return ServiceResult.success(count)

    def clear_all(self) -> ServiceResult[int]:
        try:
            deleted = self.store.delete_all()
        except Exception as e:
            self.logger.exception("Error clearing chunks: %s", e)
            return ServiceResult.upstream_error(f"Document store error: {e}")

        self.logger.info("Cleared %d chunks", deleted)
        return ServiceResult.success(deleted)

    def delete_document(self, doc_id: Optional[str]) -> ServiceResult[int]:
        doc_id = (doc_id or "").strip()
        if not doc_id:
            return ServiceResult.validation_error("Document ID is required")

        with self.doc_locks.hold(doc_id):
            try:
                deleted = self.store.delete_by_doc_id(doc_id)
            except Exception as e:
                self.logger.exception("Error deleting doc_id '%s': %s", doc_id, e)
                return ServiceResult.upstream_error(f"Document store error: {e}")

        return ServiceResult.success(deleted)
