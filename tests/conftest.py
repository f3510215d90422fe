# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Updated: 2026-01-20
# Description: conftest.py
# -----------------------------------------------------------------------------

import hashlib
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# keep test runs quiet and local: no log file, no Gradio mount on import
os.environ.setdefault("KB_LOG_TO_FILE", "0")
os.environ.setdefault("KB_MOUNT_UI", "0")

from chunking.KBChunk import KBChunk  # noqa: E402
from chunking.KBChunker import KBChunker  # noqa: E402
from retrieval.KBRetrievalRanker import KBRetrievalRanker  # noqa: E402
from services.KBDocumentService import KBDocumentService  # noqa: E402
from services.KBIngestService import KBIngestService  # noqa: E402
from services.KBQueryService import KBQueryService  # noqa: E402
from utility.keyed_lock import KeyedLock  # noqa: E402

FAKE_DIM = 8


class FakeEmbedder:
    """
    Deterministic embedding provider. Texts listed in `vectors` get that
    vector; anything else gets a hash-derived one.
    """

    def __init__(self, vectors: Optional[Dict[str, List[float]]] = None, fail: bool = False):
        self.vectors = dict(vectors or {})
        self.fail = fail
        self.calls: List[List[str]] = []

    def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        self.calls.append(list(texts))
        if self.fail:
            raise RuntimeError("embedding provider unavailable")
        return [list(self.vectors.get(t) or self._hash_vector(t)) for t in texts]

    @staticmethod
    def _hash_vector(text: str) -> List[float]:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [b / 255.0 - 0.5 for b in digest[:FAKE_DIM]]


class InMemoryVectorStore:
    """List-backed document store; `fail_on` names methods that should raise."""

    def __init__(self, fail_on: Sequence[str] = ()):
        self.chunks: List[KBChunk] = []
        self.fail_on = set(fail_on)

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail_on:
            raise ConnectionError(f"store unavailable during {op}")

    def test_connection(self) -> bool:
        return "test_connection" not in self.fail_on

    def delete_by_doc_id(self, doc_id: str) -> int:
        self._maybe_fail("delete_by_doc_id")
        before = len(self.chunks)
        self.chunks = [c for c in self.chunks if c.doc_id != doc_id]
        return before - len(self.chunks)

    def insert_chunks(self, chunks: Sequence[KBChunk]) -> List[str]:
        self._maybe_fail("insert_chunks")
        self.chunks.extend(chunks)
        return [c.chunk_id for c in chunks]

    def find_all(self) -> List[KBChunk]:
        self._maybe_fail("find_all")
        return list(self.chunks)

    def count(self) -> int:
        self._maybe_fail("count")
        return len(self.chunks)

    def delete_all(self) -> int:
        self._maybe_fail("delete_all")
        n = len(self.chunks)
        self.chunks = []
        return n


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def doc_locks() -> KeyedLock:
    return KeyedLock()


@pytest.fixture
def ingest_service(store, embedder, doc_locks) -> KBIngestService:
    return KBIngestService(store=store, embedder=embedder, chunker=KBChunker(), doc_locks=doc_locks)


@pytest.fixture
def query_service(store, embedder) -> KBQueryService:
    return KBQueryService(store=store, embedder=embedder, ranker=KBRetrievalRanker())


@pytest.fixture
def document_service(store, doc_locks) -> KBDocumentService:
    return KBDocumentService(store=store, doc_locks=doc_locks)
