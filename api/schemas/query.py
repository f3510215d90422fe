# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-20
# Description: query.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

class QueryRequest(BaseModel):
    q: str = Field("", validation_alias=AliasChoices("q", "question", "query"))
    include_matches: bool = False

class QueryMatch(BaseModel):
    doc_id: str
    chunk_index: int
    title: Optional[str] = None
    category: Optional[str] = None
    score: float
    text: str

class QueryResponse(BaseModel):
    success: bool = True
    answer: str
    confidence: int
    tier: str
    matches: Optional[List[QueryMatch]] = None
