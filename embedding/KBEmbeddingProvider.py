# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: KBEmbeddingProvider
# -----------------------------------------------------------------------------

from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class KBEmbeddingProvider(Protocol):
    def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        """One vector per input text, same order, fixed dimension."""
        ...
