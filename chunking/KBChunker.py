# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-11
# Updated: 2026-01-20
# Description: KBChunker
# -----------------------------------------------------------------------------
import logging
import re
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

from chunking.KBChunk import KBChunk, DEFAULT_CATEGORY
from utility.logging_utils import get_class_logger

DEFAULT_MAX_LENGTH = 400

# A sentence break is only used if it keeps at least this share of a full chunk
SENTENCE_BREAK_MIN_RATIO = 0.6

_WHITESPACE_RE = re.compile(r"\s+")


def check_max_length(max_length: Any) -> int:
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
        raise ValueError(f"max_length must be a positive int, got {max_length!r}")
    return max_length


def normalize_text(text: Any) -> str:
    """Collapse whitespace runs to one space and strip. Non-strings give ''."""
    if not isinstance(text, str):
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def chunk_spans(clean: str, max_length: int = DEFAULT_MAX_LENGTH) -> List[Tuple[int, int]]:
    """
    Raw (start, end) cut positions over already-normalised text.

    The spans are contiguous and cover `clean` exactly; none is longer
    than max_length.
    """
    check_max_length(max_length)

    spans: List[Tuple[int, int]] = []
    n = len(clean)
    min_break = SENTENCE_BREAK_MIN_RATIO * max_length

    start = 0
    while start < n:
        end = start + max_length

        if end < n:
            # last period inside the window, so the cut never passes `end`
            period = clean.rfind(".", start, end)
            if period != -1 and period - start >= min_break:
                end = period + 1
        else:
            end = n

        spans.append((start, end))
        start = end

    return spans


def chunk_text(text: Any, max_length: int = DEFAULT_MAX_LENGTH) -> List[str]:
    """
    Split text into bounded-length chunks, preferring sentence ends.

    Returns [] when there is no usable content.
    """
    check_max_length(max_length)

    clean = normalize_text(text)
    if not clean:
        return []

    if len(clean) <= max_length:
        return [clean]

    chunks: List[str] = []
    for start, end in chunk_spans(clean, max_length):
        piece = clean[start:end].strip()
        if piece:
            chunks.append(piece)
    return chunks


class KBChunker:
    """
    Splits knowledge-base documents into KBChunk records.
    """

    def __init__(
        self,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        logger: logging.Logger | None = None,
    ):
        self.max_length = check_max_length(max_length)
        self.logger = logger or get_class_logger(self.__class__)

    def chunk_text(self, text: Any) -> List[str]:
        return chunk_text(text, self.max_length)

    def chunk_document(
        self,
        doc_id: str,
        text: Any,
        *,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[KBChunk]:
        pieces = self.chunk_text(text)
        if not pieces:
            self.logger.warning("No chunks produced for doc_id=%s", doc_id)
            return []

        return self.build_chunks(doc_id, pieces, title=title, category=category)

    def build_chunks(
        self,
        doc_id: str,
        pieces: List[str],
        *,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[KBChunk]:
        """Wrap already-split text pieces as KBChunk records for one document."""
        created_at = datetime.now(timezone.utc)
        total = len(pieces)
        resolved_title = (title or "").strip() or doc_id
        resolved_category = (category or "").strip() or DEFAULT_CATEGORY

        chunks = [
            KBChunk(
                doc_id=doc_id,
                chunk_index=idx,
                text=piece,
                title=resolved_title,
                category=resolved_category,
                total_chunks=total,
                created_at=created_at,
            )
            for idx, piece in enumerate(pieces)
        ]

        if chunks:
            avg_len = sum(len(c.text) for c in chunks) / total
            self.logger.info(
                "Chunking Summary: doc_id=%s chunks=%d | avg_len=%.1f chars | max_length=%d",
                doc_id,
                total,
                avg_len,
                self.max_length,
            )
        return chunks
