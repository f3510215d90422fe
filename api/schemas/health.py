# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, Optional

from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    database: str
    documents_in_db: Optional[int] = None
    error: Optional[str] = None

class SmokeTestSummary(BaseModel):
    total: int
    passed: int
    failed: int

class DeepHealthResponse(BaseModel):
    status: str
    results: Dict[str, bool]
    summary: SmokeTestSummary
