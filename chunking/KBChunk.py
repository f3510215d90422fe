# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-10
# Description: KBChunk
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

DEFAULT_CATEGORY = "general"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class KBChunk:
    """
    A bounded-length fragment of a knowledge-base document, stored with its
    own embedding. For one doc_id, chunk_index runs 0..total_chunks-1.
    """

    # Core identifiers
    doc_id: str
    chunk_index: int

    # Text
    text: str

    # Document metadata
    title: str
    category: str = DEFAULT_CATEGORY
    total_chunks: int = 1
    created_at: datetime = field(default_factory=_utc_now)

    # Filled in by the embedding provider
    embedding: Optional[List[float]] = None

    @property
    def chunk_id(self) -> str:
        return f"{self.doc_id}::{self.chunk_index}"

    def to_metadata(self) -> Dict[str, Any]:
        r"""
        Converts the chunk into a metadata dictionary suitable for Chroma/JSON storage.
        The embedding and text are stored separately.
        """
        return {
            "doc_id": self.doc_id,
            "chunk_index": self.chunk_index,
            "title": self.title,
            "category": self.category,
            "total_chunks": self.total_chunks,
            "created_at": self.created_at.isoformat(),
        }

    @staticmethod
    def _parse_created_at(raw: Any) -> datetime:
        # unparseable or missing timestamps fall back to now
        if isinstance(raw, str) and raw:
            try:
                return datetime.fromisoformat(raw)
            except ValueError:
                return _utc_now()
        return _utc_now()

    @classmethod
    def from_record(
        cls,
        text: str,
        metadata: Dict[str, Any],
        embedding: Optional[List[float]] = None,
    ) -> "KBChunk":
        """Rebuild a chunk from a stored (text, metadata, embedding) triple."""
        created_at = cls._parse_created_at(metadata.get("created_at"))
        doc_id = str(metadata.get("doc_id", ""))
        return cls(
            doc_id=doc_id,
            chunk_index=int(metadata.get("chunk_index", 0)),
            text=text or "",
            title=str(metadata.get("title") or doc_id),
            category=str(metadata.get("category") or DEFAULT_CATEGORY),
            total_chunks=int(metadata.get("total_chunks", 1)),
            created_at=created_at,
            embedding=embedding,
        )

    def short_preview(self, n: int = 120) -> str:
        """Return a compact text preview for logging/debugging."""
        preview = (self.text[:n] + "...") if len(self.text) > n else self.text
        return f"[{self.doc_id}#{self.chunk_index}] {preview}"
