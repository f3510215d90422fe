# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: KBRetrievalRanker
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence

from chunking.KBChunk import KBChunk
from retrieval.similarity import cosine_similarity
from utility.logging_utils import get_class_logger

EMPTY_CORPUS_ANSWER = (
    "I don't have any information in my database yet. Please add some documents first."
)
NO_MATCH_ANSWER = (
    "I'm sorry, but I don't have information about that in my knowledge base. "
    "Please ask me something about the documents you've provided."
)
HEDGE_PREFIX = "Based on my knowledge: "


class ConfidenceTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    EMPTY = "empty"


@dataclass(frozen=True)
class ScoredChunk:
    chunk: KBChunk
    score: float


@dataclass(frozen=True)
class RankedAnswer:
    answer: str
    confidence: int
    tier: ConfidenceTier
    best_score: float = 0.0
    matches: List[ScoredChunk] = field(default_factory=list)


def to_confidence(score: float) -> int:
    """Score in [-1, 1] -> integer percentage in [0, 100], rounding half up."""
    pct = math.floor(score * 100 + 0.5)
    return int(max(0, min(100, pct)))


class KBRetrievalRanker:
    """
    Ranks the whole corpus against a query vector and turns the single best
    match into an answer using three confidence tiers:

      score >  high_threshold             -> stored text verbatim
      medium_threshold < score <= high    -> stored text with a hedge prefix
      score <= medium_threshold           -> fixed refusal, confidence 0

    Pure in-memory computation; holds no mutable state after construction.
    """

    def __init__(
        self,
        *,
        high_threshold: float = 0.70,
        medium_threshold: float = 0.60,
        top_k: int = 3,
        logger: logging.Logger | None = None,
    ) -> None:
        if medium_threshold > high_threshold:
            raise ValueError(
                f"medium_threshold ({medium_threshold}) must be <= high_threshold ({high_threshold})"
            )
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")

        self.high_threshold = high_threshold
        self.medium_threshold = medium_threshold
        self.top_k = top_k
        self.logger = logger or get_class_logger(self.__class__)

    def rank(self, query_vector: Any, corpus: Sequence[KBChunk]) -> List[ScoredChunk]:
        """Score every chunk and sort best-first; equal scores keep corpus order."""
        scored = [
            ScoredChunk(chunk=c, score=cosine_similarity(query_vector, c.embedding))
            for c in corpus
        ]
        # sorted() is stable, including with reverse=True
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def answer_for(self, best: ScoredChunk, matches: Optional[List[ScoredChunk]] = None) -> RankedAnswer:
        s = best.score
        matches = matches if matches is not None else [best]

        if s > self.high_threshold:
            return RankedAnswer(
                answer=best.chunk.text,
                confidence=to_confidence(s),
                tier=ConfidenceTier.HIGH,
                best_score=s,
                matches=matches,
            )

        if s > self.medium_threshold:
            return RankedAnswer(
                answer=f"{HEDGE_PREFIX}{best.chunk.text}",
                confidence=to_confidence(s),
                tier=ConfidenceTier.MEDIUM,
                best_score=s,
                matches=matches,
            )

        return RankedAnswer(
            answer=NO_MATCH_ANSWER,
            confidence=0,
            tier=ConfidenceTier.LOW,
            best_score=s,
            matches=matches,
        )

    def rank_and_answer(self, query_vector: Any, corpus: Sequence[KBChunk]) -> RankedAnswer:
        if query_vector is None:
            raise ValueError("query_vector is required")

        if not corpus:
            self.logger.info("Empty corpus: nothing to rank")
            return RankedAnswer(
                answer=EMPTY_CORPUS_ANSWER,
                confidence=0,
                tier=ConfidenceTier.EMPTY,
            )

        ranked = self.rank(query_vector, corpus)
        top = ranked[: self.top_k]

        self.logger.info(
            "Ranked %d chunks; best match score: %.3f",
            len(ranked),
            top[0].score,
        )
        for pos, hit in enumerate(top, start=1):
            self.logger.debug("  #%d score=%.4f %s", pos, hit.score, hit.chunk.short_preview(80))

        result = self.answer_for(top[0], matches=top)
        self.logger.info("Answer tier=%s confidence=%d", result.tier.value, result.confidence)
        return result
