# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-01-20
# Description: KBEmbedder
# -----------------------------------------------------------------------------
from typing import Any, List, Sequence

import numpy as np
from openai import AzureOpenAI

from config.Config import Config
from embedding.KBEmbeddingProvider import KBEmbeddingProvider
from utility.logging_utils import get_class_logger

AZURE_OPENAI_API_VERSION = "2024-10-21"


class KBEmbedder(KBEmbeddingProvider):
    """
    Azure OpenAI embedding provider.

    Failures are raised to the caller as-is; nothing is retried here.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            batch_size: int = 256,
            normalize: bool = True,
            client: Any = None,
            logger=None,
    ):
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        self.cfg = cfg
        self.batch_size = batch_size
        self.normalize = normalize
        self.logger = logger or get_class_logger(self.__class__)

        self.client = client or AzureOpenAI(
            api_key=cfg.openai_azure_api_key,
            azure_endpoint=cfg.openai_azure_endpoint,
            api_version=AZURE_OPENAI_API_VERSION,
        )
        self.model = cfg.openai_azure_embed_deployment or "text-embedding-3-large"
        self.logger.info("Azure OpenAI embedder initialised (model=%s, batch=%d)", self.model, self.batch_size)

    def _embed_batch(self, texts: List[str]) -> np.ndarray:
        resp = self.client.embeddings.create(model=self.model, input=texts)

        arr = np.asarray([d.embedding for d in resp.data], dtype=np.float32)
        if arr.shape[0] != len(texts):
            raise ValueError(
                f"Embedding count mismatch: got {arr.shape[0]} vectors for {len(texts)} texts"
            )

        # Normalize vectors (cosine-friendly)
        if self.normalize:
            norms = np.linalg.norm(arr, axis=1, keepdims=True) + 1e-12
            arr = arr / norms
        return arr

    def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        items = list(texts)
        if not items:
            return []

        self.logger.info("Embedding %d texts (batch=%d)", len(items), self.batch_size)

        out: List[List[float]] = []
        for i in range(0, len(items), self.batch_size):
            batch = items[i:i + self.batch_size]
            try:
                arr = self._embed_batch(batch)
            except Exception as e:
                self.logger.error("Embedding batch at offset %d failed: %s", i, e)
                raise
            out.extend(row.astype(float).tolist() for row in arr)

        self.logger.info("Completed embeddings for %d texts.", len(out))
        return out

