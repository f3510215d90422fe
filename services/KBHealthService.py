# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-20
# Description: KBHealthService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass, field
from typing import Any

from api.schemas.health import DeepHealthResponse, HealthResponse, SmokeTestSummary
from health.TestRunner import TestRunner
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


@dataclass
class KBHealthService:
    """
    health():      storage reachability + current chunk count
    deep_health(): wraps TestRunner (store + embedding smoke tests)
    """

    store: KBVectorStore
    test_runner: TestRunner
    logger: Any = field(default=None)

    def __post_init__(self) -> None:
        self.logger: logging.Logger = self.logger or get_class_logger(self.__class__)

    def health(self) -> HealthResponse:
        try:
            reachable = self.store.test_connection()
            count = self.store.count() if reachable else None
        except Exception as e:
            self.logger.error("Health probe failed: %s", e)
            return HealthResponse(status="unhealthy", database="disconnected", error=str(e))

        if not reachable:
            return HealthResponse(
                status="unhealthy",
                database="disconnected",
                error="Cannot connect to document store",
            )

        return HealthResponse(status="healthy", database="connected", documents_in_db=count)

    def deep_health(self) -> DeepHealthResponse:
        results = self.test_runner.run_all()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
