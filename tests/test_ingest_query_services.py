# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: test_ingest_query_services.py
# -----------------------------------------------------------------------------
import pytest

from chunking.KBChunker import KBChunker
from ingestion.sample_documents import SAMPLE_DOCUMENTS
from retrieval.KBRetrievalRanker import EMPTY_CORPUS_ANSWER, ConfidenceTier, KBRetrievalRanker
from services.KBIngestService import KBIngestService
from services.KBQueryService import KBQueryService
from services.KBServiceResult import ErrorKind

from conftest import FakeEmbedder, InMemoryVectorStore

LONG_TEXT = "The quick brown fox jumps over the lazy dog near the river bank. " * 20


def test_ingest_then_query_returns_stored_text_verbatim(store):
    embedder = FakeEmbedder({"The sky is blue.": [0.2, 0.9, 0.1], "What colour is the sky?": [0.2, 0.9, 0.1]})
    ingest = KBIngestService(store=store, embedder=embedder, chunker=KBChunker())
    query = KBQueryService(store=store, embedder=embedder, ranker=KBRetrievalRanker())

    ingested = ingest.ingest("d1", "The sky is blue.")
    assert ingested.ok
    assert ingested.value.chunk_count == 1

    result = query.query("What colour is the sky?")
    assert result.ok
    assert result.value.answer == "The sky is blue."
    assert result.value.confidence == 100
    assert result.value.tier is ConfidenceTier.HIGH


def test_ingest_embeds_all_chunks_in_one_call(ingest_service, embedder, store):
    result = ingest_service.ingest("fox", LONG_TEXT)

    assert result.ok
    assert len(embedder.calls) == 1
    assert len(embedder.calls[0]) == result.value.chunk_count
    assert all(c.embedding is not None for c in store.chunks)


def test_ingest_stores_metadata(ingest_service, store):
    ingest_service.ingest("fox", LONG_TEXT, title="Fox facts", category="animals")

    n = len(store.chunks)
    assert n > 1
    assert [c.chunk_index for c in store.chunks] == list(range(n))
    assert all(c.total_chunks == n for c in store.chunks)
    assert {c.title for c in store.chunks} == {"Fox facts"}
    assert {c.category for c in store.chunks} == {"animals"}


def test_reingest_replaces_previous_chunks(ingest_service, store):
    first = ingest_service.ingest("d1", LONG_TEXT)
    assert first.value.chunk_count > 1

    second = ingest_service.ingest("d1", "Completely new text.")
    assert second.ok
    assert second.value.replaced_chunks == first.value.chunk_count
    assert store.count() == 1
    assert store.chunks[0].text == "Completely new text."


def test_reingest_leaves_other_documents_alone(ingest_service, store):
    ingest_service.ingest("a", "Alpha text.")
    ingest_service.ingest("b", "Beta text.")
    ingest_service.ingest("a", "Alpha again.")

    assert sorted(c.text for c in store.chunks) == ["Alpha again.", "Beta text."]


@pytest.mark.parametrize(
    "doc_id, text",
    [("", "text"), ("   ", "text"), (None, "text"), ("d1", ""), ("d1", None)],
)
def test_ingest_rejects_missing_input(ingest_service, embedder, doc_id, text):
    result = ingest_service.ingest(doc_id, text)
    assert result.error_kind is ErrorKind.VALIDATION
    assert result.error == "Document ID and text are required"
    assert embedder.calls == []


def test_ingest_whitespace_only_text_has_no_valid_content(ingest_service, embedder, store):
    result = ingest_service.ingest("d1", " \n\t ")
    assert result.error_kind is ErrorKind.VALIDATION
    assert result.error == "No valid text found"
    assert embedder.calls == []
    assert store.count() == 0


def test_ingest_surfaces_embedding_failure(store):
    svc = KBIngestService(store=store, embedder=FakeEmbedder(fail=True), chunker=KBChunker())
    result = svc.ingest("d1", "Some text.")

    assert result.error_kind is ErrorKind.UPSTREAM
    assert "embedding provider unavailable" in result.error
    assert store.count() == 0


def test_ingest_surfaces_store_failure(embedder):
    svc = KBIngestService(
        store=InMemoryVectorStore(fail_on=["insert_chunks"]),
        embedder=embedder,
        chunker=KBChunker(),
    )
    result = svc.ingest("d1", "Some text.")
    assert result.error_kind is ErrorKind.UPSTREAM


def test_ingest_rejects_short_embedding_batch(store):
    class ShortEmbedder(FakeEmbedder):
        def embed_texts(self, texts):
            return super().embed_texts(texts)[:-1]

    svc = KBIngestService(store=store, embedder=ShortEmbedder(), chunker=KBChunker(max_length=50))
    result = svc.ingest("d1", LONG_TEXT)
    assert result.error_kind is ErrorKind.UPSTREAM
    assert store.count() == 0


def test_query_on_empty_corpus(query_service):
    result = query_service.query("anything?")
    assert result.ok
    assert result.value.answer == EMPTY_CORPUS_ANSWER
    assert result.value.confidence == 0


@pytest.mark.parametrize("question", ["", "   ", None])
def test_query_rejects_missing_question(query_service, question):
    result = query_service.query(question)
    assert result.error_kind is ErrorKind.VALIDATION
    assert result.error == "Question is required"


def test_query_surfaces_embedding_failure(store):
    svc = KBQueryService(store=store, embedder=FakeEmbedder(fail=True), ranker=KBRetrievalRanker())
    result = svc.query("hello?")
    assert result.error_kind is ErrorKind.UPSTREAM


def test_query_surfaces_store_failure(embedder):
    svc = KBQueryService(
        store=InMemoryVectorStore(fail_on=["find_all"]),
        embedder=embedder,
        ranker=KBRetrievalRanker(),
    )
    result = svc.query("hello?")
    assert result.error_kind is ErrorKind.UPSTREAM
    assert "store unavailable" in result.error


def test_load_sample_data_replaces_corpus(ingest_service, store):
    ingest_service.ingest("old", "Old text that should go away.")

    result = ingest_service.load_sample_data()

    assert result.ok
    assert result.value.documents_added == len(SAMPLE_DOCUMENTS)
    assert result.value.chunks_created == len(SAMPLE_DOCUMENTS)
    assert "old" not in {c.doc_id for c in store.chunks}
    titles = {c.doc_id: c.title for c in store.chunks}
    assert titles["general-1"] == "General Fact"


def test_load_sample_data_stops_on_failure(store):
    svc = KBIngestService(store=store, embedder=FakeEmbedder(fail=True), chunker=KBChunker())
    result = svc.load_sample_data()
    assert result.error_kind is ErrorKind.UPSTREAM


def test_document_service_count_clear_delete(ingest_service, document_service):
    ingest_service.ingest("a", LONG_TEXT)
    ingest_service.ingest("b", "Beta text.")
    total = document_service.count_chunks().value

    deleted = document_service.delete_document("b")
    assert deleted.value == 1
    assert document_service.count_chunks().value == total - 1

    cleared = document_service.clear_all()
    assert cleared.value == total - 1
    assert document_service.count_chunks().value == 0


def test_document_service_errors(document_service):
    assert document_service.delete_document("  ").error_kind is ErrorKind.VALIDATION

    from services.KBDocumentService import KBDocumentService

    broken = KBDocumentService(store=InMemoryVectorStore(fail_on=["count", "delete_all"]))
    assert broken.count_chunks().error_kind is ErrorKind.UPSTREAM
    assert broken.clear_all().error_kind is ErrorKind.UPSTREAM
