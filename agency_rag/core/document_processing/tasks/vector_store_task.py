"""
Vector index task.

Adapts pipeline chunks to the vector index: deterministic chunk keys,
chunk metadata, single-chunk upserts, purge of a document's key range and
verification that every expected key landed.

Dependencies: agency_rag.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging

from agency_rag.boundary.vdb.vector_schemas import ChunkVectorMetadata
from agency_rag.core.exceptions import IncompleteIndexError

from ..models import Chunk

logger = logging.getLogger(__name__)


def chunk_key(document_id: str, chunk_index: int) -> str:
    """Deterministic vector key for a document chunk."""
    return f"{document_id}-chunk-{chunk_index}"


def chunk_keys(document_id: str, count: int) -> list[str]:
    """Keys for chunk indices 0 .. count-1."""
    return [chunk_key(document_id, i) for i in range(count)]


class VectorStoreTask:
    """Write document chunks to a vector index."""

    def __init__(self, index) -> None:
        """
        Initialize vector store task.

        Args:
            index: Vector index (InMemoryVectorIndex or S3VectorsIndex)
        """
        self._index = index

    def upsert_chunk(self, chunk: Chunk, vector: list[float]) -> str:
        """
        Upsert one embedded chunk under its deterministic key.

        Returns:
            str: The chunk key written

        Raises:
            IndexUnavailableError: Index write failed
        """
        key = chunk_key(chunk.document_id, chunk.index)
        metadata = ChunkVectorMetadata(
            document_id=chunk.document_id,
            project_id=chunk.project_id,
            organization_id=chunk.organization_id,
            chunk_index=chunk.index,
            text=chunk.text,
        )
        self._index.upsert(key, vector, metadata)
        return key

    def purge(self, document_id: str, count: int) -> None:
        """
        Delete the keys of chunk indices 0 .. count-1.

        Raises:
            IndexUnavailableError: Index delete failed
        """
        if count <= 0:
            return
        self._index.delete(chunk_keys(document_id, count))
        logger.info(
            f"{__name__}:purge - Deleted stale chunk vectors",
            extra={"document_id": document_id, "key_count": count},
        )

    def verify(self, document_id: str, count: int) -> None:
        """
        Check that every expected chunk key is present.

        Raises:
            IncompleteIndexError: One or more keys are missing
            IndexUnavailableError: Index lookup failed
        """
        if count <= 0:
            return
        expected = chunk_keys(document_id, count)
        present = self._index.existing_keys(expected)
        missing = [key for key in expected if key not in present]
        if missing:
            raise IncompleteIndexError(document_id, missing)
