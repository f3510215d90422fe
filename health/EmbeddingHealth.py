# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Updated: 2026-01-20
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from embedding.KBEmbeddingProvider import KBEmbeddingProvider
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding provider.

    Verifies:
      - The embedding call completes successfully
      - The response contains a non-empty vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: KBEmbeddingProvider,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        test_text = "Knowledge base embedding healthcheck"
        self.logger.info("Running embedding healthcheck")

        try:
            start = time.time()
            vectors = self.embedder.embed_texts([test_text])
            elapsed_ms = (time.time() - start) * 1000.0

            if not vectors or not vectors[0]:
                self.logger.error("No embedding data returned in response.")
                return False

            dim = len(vectors[0])
            self.logger.info(
                "Embedding call succeeded in %.1f ms. Returned dimension: %d",
                elapsed_ms,
                dim,
            )

            if self.expected_dim and dim != self.expected_dim:
                self.logger.warning(
                    "Dimension mismatch: expected %d, got %d.",
                    self.expected_dim,
                    dim,
                )
                return False

            self.logger.info("Embedding healthcheck PASSED.")
            return True

        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False
