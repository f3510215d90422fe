# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-20
# Description: kb_stats.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel


class DocumentStats(BaseModel):
    doc_id: str
    chunk_count: int
    title: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[str] = None

class KBStatsResponse(BaseModel):
    success: bool = True
    collection_name: str
    total_chunks: int
    total_documents: int
    documents: List[DocumentStats]
