# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: test_chroma_vector_store.py
# -----------------------------------------------------------------------------
import uuid

import chromadb
import pytest

from chunking.KBChunk import KBChunk
from vectorstore.ChromaKBVectorStore import ChromaKBVectorStore


@pytest.fixture
def chroma_store():
    # in-process client; a fresh collection per test
    client = chromadb.EphemeralClient()
    return ChromaKBVectorStore(client=client, collection_name=f"kb_test_{uuid.uuid4().hex[:8]}")


def _chunks(doc_id, texts, dim=4):
    return [
        KBChunk(
            doc_id=doc_id,
            chunk_index=i,
            text=t,
            title=f"{doc_id} title",
            total_chunks=len(texts),
            embedding=[float(i + 1)] + [0.5] * (dim - 1),
        )
        for i, t in enumerate(texts)
    ]


def test_requires_cfg_or_client():
    with pytest.raises(ValueError):
        ChromaKBVectorStore()


def test_insert_and_find_all_round_trip(chroma_store):
    ids = chroma_store.insert_chunks(_chunks("d1", ["one.", "two."]))
    assert ids == ["d1::0", "d1::1"]
    assert chroma_store.test_connection()
    assert chroma_store.count() == 2

    found = sorted(chroma_store.find_all(), key=lambda c: c.chunk_index)
    assert [c.text for c in found] == ["one.", "two."]
    assert found[1].doc_id == "d1"
    assert found[1].title == "d1 title"
    assert found[1].total_chunks == 2
    assert found[1].embedding == pytest.approx([2.0, 0.5, 0.5, 0.5])


def test_insert_rejects_missing_embedding(chroma_store):
    chunk = KBChunk(doc_id="d1", chunk_index=0, text="x", title="x")
    with pytest.raises(ValueError):
        chroma_store.insert_chunks([chunk])


def test_delete_by_doc_id_only_touches_that_doc(chroma_store):
    chroma_store.insert_chunks(_chunks("a", ["a0", "a1", "a2"]))
    chroma_store.insert_chunks(_chunks("b", ["b0"]))

    assert chroma_store.delete_by_doc_id("a") == 3
    assert chroma_store.delete_by_doc_id("a") == 0
    assert [c.doc_id for c in chroma_store.find_all()] == ["b"]


def test_delete_all(chroma_store):
    assert chroma_store.delete_all() == 0
    chroma_store.insert_chunks(_chunks("a", ["a0", "a1"]))

    assert chroma_store.delete_all() == 2
    assert chroma_store.count() == 0
    assert chroma_store.find_all() == []
