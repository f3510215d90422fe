# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-15
# Updated: 2026-01-20
# Description: KBVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, List, runtime_checkable

from chunking.KBChunk import KBChunk


@runtime_checkable
class KBVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def delete_by_doc_id(self, doc_id: str) -> int:
        ...

    def insert_chunks(self, chunks: Sequence[KBChunk]) -> List[str]:
        ...

    def find_all(self) -> List[KBChunk]:
        ...

    def count(self) -> int:
        ...

    def delete_all(self) -> int:
        ...
