# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: test_retrieval_ranker.py
# -----------------------------------------------------------------------------
import pytest

from chunking.KBChunk import KBChunk
from retrieval.KBRetrievalRanker import (
    EMPTY_CORPUS_ANSWER,
    HEDGE_PREFIX,
    NO_MATCH_ANSWER,
    ConfidenceTier,
    KBRetrievalRanker,
    ScoredChunk,
    to_confidence,
)


def _chunk(text, embedding, doc_id="d1", idx=0):
    return KBChunk(doc_id=doc_id, chunk_index=idx, text=text, title=doc_id, embedding=embedding)


@pytest.fixture
def ranker():
    return KBRetrievalRanker()


def test_empty_corpus_returns_fixed_answer(ranker):
    result = ranker.rank_and_answer([1.0, 0.0], [])
    assert result.answer == EMPTY_CORPUS_ANSWER
    assert result.confidence == 0
    assert result.tier is ConfidenceTier.EMPTY


def test_missing_query_vector_is_rejected(ranker):
    with pytest.raises(ValueError):
        ranker.rank_and_answer(None, [_chunk("x", [1.0])])


@pytest.mark.parametrize(
    "score, tier, confidence, hedged",
    [
        (1.0, ConfidenceTier.HIGH, 100, False),
        (0.7000001, ConfidenceTier.HIGH, 70, False),
        (0.70, ConfidenceTier.MEDIUM, 70, True),
        (0.65, ConfidenceTier.MEDIUM, 65, True),
        (0.6000001, ConfidenceTier.MEDIUM, 60, True),
    ],
)
def test_answering_tiers(ranker, score, tier, confidence, hedged):
    best = ScoredChunk(chunk=_chunk("The sky is blue.", None), score=score)
    result = ranker.answer_for(best)

    assert result.tier is tier
    assert result.confidence == confidence
    expected = f"{HEDGE_PREFIX}The sky is blue." if hedged else "The sky is blue."
    assert result.answer == expected


@pytest.mark.parametrize("score", [0.60, 0.3, 0.0, -0.5, -1.0])
def test_low_tier_refuses_with_zero_confidence(ranker, score):
    best = ScoredChunk(chunk=_chunk("The sky is blue.", None), score=score)
    result = ranker.answer_for(best)

    assert result.tier is ConfidenceTier.LOW
    assert result.answer == NO_MATCH_ANSWER
    assert result.confidence == 0


def test_score_of_exactly_point_seven_is_hedged(ranker):
    result = ranker.answer_for(ScoredChunk(chunk=_chunk("Answer.", None), score=0.70))
    assert result.answer.startswith(HEDGE_PREFIX)


@pytest.mark.parametrize(
    "score, expected",
    [(0.625, 63), (0.7049, 70), (0.999999, 100), (1.0000000002, 100), (-0.3, 0)],
)
def test_to_confidence_rounds_half_up_and_clamps(score, expected):
    assert to_confidence(score) == expected


def test_best_match_is_answered_verbatim(ranker):
    corpus = [
        _chunk("Cats purr.", [0.0, 1.0], doc_id="cats"),
        _chunk("The sky is blue.", [1.0, 0.0], doc_id="sky"),
        _chunk("Grass is green.", [0.5, 0.5], doc_id="grass"),
    ]
    result = ranker.rank_and_answer([1.0, 0.0], corpus)

    assert result.answer == "The sky is blue."
    assert result.confidence == 100
    assert result.tier is ConfidenceTier.HIGH
    assert [m.chunk.doc_id for m in result.matches] == ["sky", "grass", "cats"]


def test_malformed_stored_embeddings_score_zero(ranker):
    corpus = [
        _chunk("no vector", None, doc_id="a"),
        _chunk("wrong length", [1.0, 0.0, 0.0], doc_id="b"),
        _chunk("garbage", ["x", "y"], doc_id="c"),
        _chunk("good", [1.0, 0.1], doc_id="d"),
    ]
    ranked = ranker.rank([1.0, 0.0], corpus)

    assert ranked[0].chunk.doc_id == "d"
    assert [s.score for s in ranked[1:]] == [0.0, 0.0, 0.0]


def test_ties_keep_corpus_order(ranker):
    corpus = [_chunk(f"t{i}", [1.0, 0.0], doc_id=f"d{i}") for i in range(5)]
    ranked = ranker.rank([2.0, 0.0], corpus)
    assert [s.chunk.doc_id for s in ranked] == ["d0", "d1", "d2", "d3", "d4"]

    result = ranker.rank_and_answer([2.0, 0.0], corpus)
    assert result.answer == "t0"


def test_only_top_k_matches_are_kept():
    ranker = KBRetrievalRanker(top_k=2)
    corpus = [_chunk(f"t{i}", [1.0, float(i)], doc_id=f"d{i}") for i in range(5)]
    result = ranker.rank_and_answer([1.0, 0.0], corpus)
    assert len(result.matches) == 2


def test_all_unrelated_corpus_refuses(ranker):
    corpus = [_chunk("Cats purr.", [0.0, 1.0])]
    result = ranker.rank_and_answer([1.0, 0.0], corpus)
    assert result.answer == NO_MATCH_ANSWER
    assert result.confidence == 0


def test_threshold_order_is_validated():
    with pytest.raises(ValueError):
        KBRetrievalRanker(high_threshold=0.5, medium_threshold=0.6)
    with pytest.raises(ValueError):
        KBRetrievalRanker(top_k=0)
