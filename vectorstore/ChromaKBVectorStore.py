# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-16
# Updated: 2026-01-20
# Description: ChromaKBVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Sequence, Dict, Any, List, Optional

import chromadb
from chromadb import ClientAPI
from chromadb.api.models.Collection import Collection

from chunking.KBChunk import KBChunk
from config.Config import Config
from utility.logging_utils import get_class_logger
from vectorstore.KBVectorStore import KBVectorStore


@dataclass
class ChromaKBVectorStore(KBVectorStore):
    """
    Chroma used as a plain record store: chunks are written and scanned
    back in full; ranking happens in KBRetrievalRanker, not in Chroma.

    Pass `client` to use any chromadb client (e.g. EphemeralClient in tests);
    otherwise a Chroma Cloud client is built from `cfg`.
    """

    cfg: Optional[Config] = None
    collection_name: str = "kb_chunks"
    client: Optional[ClientAPI] = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.client is None:
            if self.cfg is None:
                raise ValueError("ChromaKBVectorStore needs either cfg or client")
            self.logger.info(
                "Initialising Chroma Cloud client (tenant=%s, database=%s)",
                self.cfg.chroma_tenant,
                self.cfg.chroma_database,
            )
            self.client = chromadb.CloudClient(
                tenant=self.cfg.chroma_tenant,
                database=self.cfg.chroma_database,
                api_key=self.cfg.chroma_api_key,
            )

        self.collection: Collection = self.client.get_or_create_collection(
            name=self.collection_name
        )
        self.logger.info("Chroma collection ready: '%s'", self.collection_name)

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            # count() is cheap and exercises the connection + auth
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def count(self) -> int:
        return int(self.collection.count())

    def insert_chunks(self, chunks: Sequence[KBChunk]) -> List[str]:
        if not chunks:
            return []

        ids: List[str] = []
        documents: List[str] = []
        embeddings: List[List[float]] = []
        metadatas: List[Dict[str, Any]] = []

        for chunk in chunks:
            if chunk.embedding is None:
                raise ValueError(f"Chunk '{chunk.chunk_id}' has no embedding")

            vec = chunk.embedding
            if hasattr(vec, "tolist"):
                vec = vec.tolist()

            ids.append(chunk.chunk_id)
            documents.append(chunk.text)
            embeddings.append(vec)
            metadatas.append(chunk.to_metadata())

        self.collection.add(
            ids=ids,
            documents=documents,
            embeddings=embeddings,
            metadatas=metadatas,
        )
        self.logger.info(
            "Inserted %d chunks into Chroma collection '%s'",
            len(ids),
            self.collection_name,
        )
        return ids

    def find_all(self) -> List[KBChunk]:
        res: Dict[str, Any] = self.collection.get(
            include=["documents", "metadatas", "embeddings"],
        )

        ids = res.get("ids") or []
        documents = res.get("documents")
        metadatas = res.get("metadatas")
        # may be a numpy array, so no truthiness test
        embeddings = res.get("embeddings")

        chunks: List[KBChunk] = []
        for i in range(len(ids)):
            text = documents[i] if documents is not None else ""
            md = metadatas[i] if metadatas is not None else None
            emb = embeddings[i] if embeddings is not None else None

            vector = [float(x) for x in emb] if emb is not None else None
            chunks.append(KBChunk.from_record(text, md if isinstance(md, dict) else {}, vector))

        self.logger.info(
            "Scanned %d chunks from Chroma collection '%s'",
            len(chunks),
            self.collection_name,
        )
        return chunks

    def _ids_where(self, where: Optional[Dict[str, Any]]) -> List[str]:
        kwargs: Dict[str, Any] = {"include": []}  # we only care about ids
        if where is not None:
            kwargs["where"] = where
        res: Dict[str, Any] = self.collection.get(**kwargs)
        # preserves order while de-duplicating
        return list(dict.fromkeys(res.get("ids", []) or []))

    def delete_by_doc_id(self, doc_id: str) -> int:
        """
        Delete all chunks in this collection that belong to the given doc_id.
        Returns the number of chunks actually deleted.
        """
        try:
            ids = self._ids_where({"doc_id": {"$eq": doc_id}})
            if not ids:
                self.logger.info(
                    "No chunks found for doc_id '%s' in collection '%s'",
                    doc_id,
                    self.collection_name,
                )
                return 0
            self.collection.delete(ids=ids)
        except Exception as e:
            self.logger.error(
                "Failed to delete chunks for doc_id '%s' from collection '%s': %s",
                doc_id,
                self.collection_name,
                e,
            )
            raise

        self.logger.info(
            "Deleted %d chunks for doc_id '%s' from collection '%s'",
            len(ids),
            doc_id,
            self.collection_name,
        )
        return len(ids)

    def delete_all(self) -> int:
        ids = self._ids_where(None)
        if ids:
            self.collection.delete(ids=ids)

        self.logger.info(
            "Cleared %d chunks from collection '%s'",
            len(ids),
            self.collection_name,
        )
        return len(ids)
